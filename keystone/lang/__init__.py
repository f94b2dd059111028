from .providers import JsonTranslator, Translator, local_provider

__all__ = ["JsonTranslator", "Translator", "local_provider"]
