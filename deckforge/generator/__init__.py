"""Presentation generator package - PPTX builder engine.

Consumes a PresentationDocument and produces PowerPoint bytes.

Modules:
    pptx_builder: Core PPTX generation
"""

from .pptx_builder import PPTX_CONTENT_TYPE, PPTXBuilder, ProducerError, produce

__all__ = [
    "PPTX_CONTENT_TYPE",
    "PPTXBuilder",
    "ProducerError",
    "produce",
]
