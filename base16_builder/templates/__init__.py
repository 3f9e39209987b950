from .registry import TemplateRegistry, load_descriptors

__all__ = ["TemplateRegistry", "load_descriptors"]
