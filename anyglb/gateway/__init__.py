"""Boundary to the model conversion backends"""

from anyglb.gateway.converter import ConversionGateway, ModelConverter
from anyglb.gateway.glb_utils import check_glb

__all__ = [
    "ConversionGateway",
    "ModelConverter",
    "check_glb",
]
