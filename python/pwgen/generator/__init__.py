"""
Password generation algorithms for pwgen.
"""

from .batch import generate_password, generate_passwords
from .pattern import PatternGenerator
from .requirements import RequirementEnforcer
from .uniform import UniformGenerator

__all__ = [
    'PatternGenerator',
    'RequirementEnforcer',
    'UniformGenerator',
    'generate_password',
    'generate_passwords',
]
