"""Módulo común con utilidades y configuraciones compartidas.

Este paquete proporciona componentes reutilizables a través de toda la
aplicación:

- Configuración centralizada
- Manejo de base de datos
- Manejo de errores y del patrón Result
- Hashing de contraseñas
- Logging
"""
