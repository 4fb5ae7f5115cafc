# Lazy imports so `from forge2eagler.core.config import ...` does not
# build the tree-sitter grammar.

__all__ = [
    "ConversionError",
    "ConverterSettings",
    "ForgeToEaglerConverter",
    "convert",
    "format_script",
    "load_settings",
    "parse_source",
]

_IMPORT_MAP = {
    "ConversionError": ".conversion",
    "ForgeToEaglerConverter": ".conversion",
    "convert": ".conversion",
    "format_script": ".conversion",
    "ConverterSettings": ".config",
    "load_settings": ".config",
    "parse_source": ".ast_parser",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'forge2eagler.core' has no attribute {name}")
