"""
Paquete principal de la aplicación VSConnect.

Contiene la API de gestión de usuarios y los módulos comunes que utiliza.
"""

from typing import List

__all__: List[str] = []
