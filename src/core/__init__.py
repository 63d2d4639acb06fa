"""Weapon Arena Core Engine

엔진(src.core.engine)은 모듈 시스템을 import하므로 여기서 다시 내보내지 않는다.
"""
__version__ = "0.1.0"
