#!/usr/bin/env python3
"""
File discovery and loading.

Probes describe paths without touching their contents; loaders read the
described files either synchronously or under an asyncio timeout.
"""
