"""Cross-section models."""

from dfr_xsec.models.rein_dfr import ReinDFRPXSec

__all__ = ["ReinDFRPXSec"]
