# Re-export all model classes
from .countdown import (
    CountdownConfig,
    GenerateGifRequest,
    TemplateTraits,
    UnitBox
)

# Make these available when importing from models
__all__ = [
    'CountdownConfig',
    'GenerateGifRequest',
    'TemplateTraits',
    'UnitBox'
]
