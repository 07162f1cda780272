"""Tests for file logging setup."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from md_creator.l4_frameworks_and_drivers.logging_setup import setup_file_logging


def test_writes_to_log_file(tmp_path: Path):
    log_path = tmp_path / 'logs' / 'mdc.log'
    root = logging.getLogger('mdc')
    before = list(root.handlers)
    try:
        setup_file_logging(log_path)
        logging.getLogger('mdc.templates').debug('hello from test')
        for handler in root.handlers:
            handler.flush()
        text = log_path.read_text(encoding='utf-8')
        assert 'Debug logging started' in text
        assert 'hello from test' in text
        assert re.search(r'^\d{4}-\d{2}-\d{2} [\d:,]+ DEBUG hello from test$', text, re.MULTILINE)
    finally:
        for handler in root.handlers[len(before) :]:
            handler.close()
            root.removeHandler(handler)
