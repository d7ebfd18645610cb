"""similarity_checker.core — Foundation layer.

Contains channel extraction, the correlation engine, the similarity
aggregator, assertions, error types, env loading and the report builder.
This module has NO dependencies on similarity_checker.techniques or
similarity_checker.registry. Only stdlib, numpy, and PIL are allowed here.
"""
