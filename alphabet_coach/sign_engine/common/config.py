# alphabet_coach/sign_engine/common/config.py
import math
import yaml
from pydantic import BaseModel, Field, model_validator

DEFAULT_TOUCH_DISTANCE = 0.12

class ClassifierThresholds(BaseModel):
    """
    Empirical thresholds used by the finger analyzer, predicates and letter rules.
    Distances are in the normalized hand frame, angles in radians.
    """
    touch_distance: float = Field(DEFAULT_TOUCH_DISTANCE, gt=0.0)
    extended_angle: float = Field(2.7, gt=0.0, le=math.pi)
    curled_max_angle: float = Field(2.5, gt=0.0, le=math.pi)
    curved_min_angle: float = Field(1.5, ge=0.0, le=math.pi)
    curved_max_angle: float = Field(2.5, gt=0.0, le=math.pi)
    min_segment_length: float = Field(1e-6, gt=0.0)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_ordering(self):
        if self.curved_min_angle >= self.curved_max_angle:
            raise ValueError("curved_min_angle must be below curved_max_angle")
        if self.curled_max_angle > self.extended_angle:
            raise ValueError("curled_max_angle must not exceed extended_angle")
        return self

def load_config(path) -> dict:
    """Reads the YAML application config. Missing sections come back as empty dicts."""
    with open(path, 'r') as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise yaml.YAMLError(f"Top level of '{path}' must be a mapping")
    for section in ('camera', 'tracking', 'classifier', 'feedback', 'visualization', 'logging'):
        config.setdefault(section, {})
    return config

def thresholds_from_config(config: dict) -> ClassifierThresholds:
    return ClassifierThresholds(**(config.get('classifier') or {}))
