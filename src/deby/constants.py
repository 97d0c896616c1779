from __future__ import annotations

CONFIG_FILE = ".debyrc"
DEBIAN_DIR  = "debian"
CHANGELOG   = "changelog"
CONTROL     = "control"
