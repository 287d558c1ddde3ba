from pan_validation.cleaning.models import DataQualityProfile
from pan_validation.cleaning.normalizer import Normalizer, normalize, normalize_value
from pan_validation.cleaning.profiler import DataQualityProfiler

__all__ = [
    "DataQualityProfile",
    "DataQualityProfiler",
    "Normalizer",
    "normalize",
    "normalize_value",
]
