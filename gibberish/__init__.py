"""
Gibberish generator.

Learns which tokens follow which from a text stream and walks the
learned transitions to produce locally-plausible gibberish.
"""

__version__ = "1.0.0"
