# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""Tests for the top-level API surface and logging helper."""

import logging

import tonewheel
from tonewheel.logging import setup_default_logging


class TestTopLevelAPI:

    def test_exports_resolve(self):
        for name in tonewheel.__all__:
            assert hasattr(tonewheel, name), name

    def test_palette_then_gradients(self):
        palette = tonewheel.generate_palette("#3b82f6", "tetradic", 4)
        assert len(palette) == 4
        for color in palette:
            assert len(tonewheel.generate_combined_gradient(color, 4)) == 4
            stops = tonewheel.gradient_stops(color, "both", 10)
            assert stops[0].hex == tonewheel.generate_combined_gradient(color, 2)[0]

    def test_version(self):
        assert tonewheel.__version__ == "1.0.0"


class TestSetupDefaultLogging:

    def test_noop_when_configured(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])
        setup_default_logging("DEBUG")
        assert calls == []

    def test_configures_once_when_bare(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        setup_default_logging("debug")
        assert calls[0]["level"] == logging.DEBUG

    def test_numeric_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        setup_default_logging(logging.WARNING)
        assert calls[0]["level"] == logging.WARNING
