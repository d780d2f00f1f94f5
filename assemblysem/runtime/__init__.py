"""
Runtime package: the enumeration and evaluation engine.
"""

from .generator import AssemblyGenerator, evaluate_formula, extract_configuration, generate_all_assemblies

__all__ = ["AssemblyGenerator", "evaluate_formula", "extract_configuration", "generate_all_assemblies"]
