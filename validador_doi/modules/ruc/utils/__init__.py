"""
Utilidades del módulo RUC
"""
