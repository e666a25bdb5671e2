#!/usr/bin/env python3
"""
Metadata generation pipeline.

A run threads one ``RunContext`` through the creator chain (discover, load,
deserialize, classify), then folds the new posts into the index with the
content generators and persists the result with the file generators.
"""
