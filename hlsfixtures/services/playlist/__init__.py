"""Parsing boundary around the m3u8 library."""
