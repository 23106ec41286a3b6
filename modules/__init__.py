# Urbanscope — Core Logic Modules
#
# Lazy imports — keep ``import modules`` cheap for scripts that only need
# the pure geometry / metric helpers.

__all__ = ["analyze_region", "search_places"]


def __getattr__(name: str):
    if name == "analyze_region":
        from modules.region_analyzer import analyze_region
        return analyze_region
    if name == "search_places":
        from modules.geocoding import search_places
        return search_places
    raise AttributeError(f"module 'modules' has no attribute {name!r}")
