"""Service layer — document pipeline returning ServiceResult.

Services may import from the func, syntax, layout, library and config
layers.  They must never import from cli or output.
"""
