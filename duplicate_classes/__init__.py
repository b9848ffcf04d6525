"""Find JAR files that contain the same compiled classes."""

__version__ = '0.1.0'

from .analysis import Analysis, analyze
from .archive import Archive, archive_locator, class_names_in
from .config import AnalysisConfig
from .errors import ConfigurationError, DuplicateClassesError, ExtractionFailure, ManifestError
from .overlap import OverlapGroup, OverlapKind, OverlapPair, OverlapReport, classify, find_overlaps
from .report import render, render_pairs, to_dict
from .scope import resolve_scope

__all__ = [
    'Analysis', 'AnalysisConfig', 'Archive', 'ConfigurationError', 'DuplicateClassesError',
    'ExtractionFailure', 'ManifestError', 'OverlapGroup', 'OverlapKind', 'OverlapPair',
    'OverlapReport', 'analyze', 'archive_locator', 'class_names_in', 'classify',
    'find_overlaps', 'render', 'render_pairs', 'resolve_scope', 'to_dict',
]
