"""Logging module."""
from .analysis_logger import AnalysisLogger

__all__ = ['AnalysisLogger']
