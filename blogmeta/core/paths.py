#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and defaults for the blogmeta project.

All locations the generator reads or writes are configured through
``GenerateOptions`` and are relative to the blog's root directory. This
module only holds the defaults used when nothing else is configured.

Expected blog layout (all configurable):
    ROOT/
    ├── posts/                   # Authored *.generate.md sources
    ├── assets/metadata/
    │   ├── comprehensive.json   # Comprehensive summary
    │   ├── pages/               # *.page.json buckets
    │   └── posts/               # Published <uuid>.md copies
    ├── logs/                    # Generator logs
    └── blogmeta.yaml            # Optional options file
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# ----- Working directory -----
ROOT: Path = Path.cwd()

# ---- Logs ----
LOG_DIR = ROOT / "logs"

# ---- Options file ----
OPTIONS_FILE_NAME = "blogmeta.yaml"

# ---- Metadata file names ----
COMPREHENSIVE_FILE_NAME = "comprehensive.json"
PAGE_FILE_SUFFIX = ".page.json"
POST_LOAD_EXTENSION = ".generate.md"
