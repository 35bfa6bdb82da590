"""
Models Layer

Model instances produced by the transformer and the registry that tells the
transformer which model types exist and which attributes they accept.
"""
