"""Generators — inject or refresh generated code at marker comments.

Markers are ``//`` comments naming a template or an embedded generator::

    // [@VERSION@]

After expansion the content is wrapped by refresh sentinels, which a later
run detects and regenerates in place::

    // [@VERSION{@]
    #define FOO_VERSION_MAJOR 1
    // [@VERSION}@]

Anything outside the sentinels is preserved untouched.
"""

from cxxtool.generate.expand import expand_templates
from cxxtool.generate.functions import parse_generators

__all__ = ["expand_templates", "parse_generators"]
