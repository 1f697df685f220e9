"""Theme engine.

Token-based themes, derived color palettes, a registry of builtin and user
themes, and synchronization of the active theme onto a style scope and an
embedded code editor.

Quick start:
    from theme_engine.app import create_engine
    ctx = create_engine(scope=my_scope)
    ctx.theme_store.set_theme("nord")
"""

__version__ = "2.0.0"
