from .keystone_model import _KeystoneModel

__all__ = ["_KeystoneModel"]
