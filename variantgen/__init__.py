"""Product variant generation: cross product of attribute selections into SKU rows."""
from .engine import generate_variants
from .models import GenerationRequest, GenerationResult

__version__ = "0.1.0"
