"""Synthetic data generators."""

from mathwaa_portfolio.generators.base import BaseGenerator
from mathwaa_portfolio.generators.export import RentRollExportGenerator

__all__ = ["BaseGenerator", "RentRollExportGenerator"]
