"""cxxtool — maintain C, C++ and Objective-C source trees.

Runs a pipeline of sanitizers (whitespace and formatting fixes) and
generators (template expansion at marker comments) over every source
and header file below a configured root.
"""

VERSION = "0.0.1"
