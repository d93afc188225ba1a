"""
Módulos del validador DOI
"""
