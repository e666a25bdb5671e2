#!/usr/bin/env python3
"""
Utility helpers: filesystem output, frontmatter splitting and identifiers.
"""
