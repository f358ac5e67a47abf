"""Candidate extraction, scoping and lexical symbol resolution."""

from .base import DefinitionMatcher
from .definitions import DefinitionFinder, RegexDefinitionMatcher, build_declaration_pattern
from .extractor import TypeNameExtractor, extract_type_names, write_type_names
from .references import ReferenceFinder
from .scope import ScopeResolver, find_package_root, resolve_search_roots

__all__ = [
    "DefinitionFinder",
    "DefinitionMatcher",
    "ReferenceFinder",
    "RegexDefinitionMatcher",
    "ScopeResolver",
    "TypeNameExtractor",
    "build_declaration_pattern",
    "extract_type_names",
    "find_package_root",
    "resolve_search_roots",
    "write_type_names",
]
