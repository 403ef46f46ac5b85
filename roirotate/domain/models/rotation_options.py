# roirotate/domain/models/rotation_options.py
from dataclasses import dataclass


@dataclass
class RotationOptions:
    """Answers from the Rotate Selection prompt."""
    angle: float  # degrees, negative = counter-clockwise
    rotate_around_image_center: bool = False
