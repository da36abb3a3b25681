"""
Returnfix - strips extra hard returns from unformatted text.

This package provides the extra returns remover: a single-pass line
transducer that joins hard-wrapped lines back into paragraphs while keeping
paragraph breaks, <pre> blocks, list items, short lines and quoted email
replies intact.
"""

__version__ = "1.0.0"
__author__ = "Returnfix Development Team"
