"""
Text processing modules for Returnfix.

This package contains the extra returns remover and the helpers it consults
for every hard return: quote prefix measurement, list marker matching and
<pre> block skipping.
"""
