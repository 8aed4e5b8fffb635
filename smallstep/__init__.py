"""
Small-step operational semantics for SIMPLE, a minimal imperative language.
"""
