"""
===============================================================================
APPLICATION LAYER
===============================================================================

Los casos de uso viven en `usecases/` (uno por operación, resultados tipados).
===============================================================================
"""
