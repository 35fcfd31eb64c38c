"""
Collection description documents of the DGGS API: models and the builder assembling them.
"""
