# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Keep the debug log and config lookups out of the real home directory."""

import pytest


@pytest.fixture(autouse=True)
def _isolated_state(tmp_path, monkeypatch):
    monkeypatch.setenv("YSHELL_STATE_DIR", str(tmp_path / "state"))
    monkeypatch.setenv("YSHELL_CONFIG_FILE", str(tmp_path / "no-config.yml"))
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
