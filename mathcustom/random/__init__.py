"""
Random sampling helpers: sign selection and weighted range sampling.
"""
