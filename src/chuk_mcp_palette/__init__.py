"""
CHUK Palette - turn colors into chords.

A hex color becomes an HSL triple, the HSL triple becomes a root pitch
class and chord kind, and those become MIDI notes and frequencies.
"""

__version__ = "0.1.0"
