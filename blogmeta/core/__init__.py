#!/usr/bin/env python3
"""
Core infrastructure: exceptions, logging, paths, options and statistics.
"""
