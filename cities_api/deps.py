"""
deps.py – Dependency Injection: singleton service instances.
Created once, when the module is first imported.
"""
from .config import settings
from .core.loader import CityDataLoader
from .core.lookup import CityLookupService
from .core.mapper import CityInfoMapper
from .handlers.city_handler import CityHandler

# ── Core singletons ────────────────────────────────────────────────────────────

_loader = CityDataLoader(settings.city_data_file)
_lookup = CityLookupService(_loader)
_mapper = CityInfoMapper()

# ── Handler singletons ─────────────────────────────────────────────────────────

_city = CityHandler(_lookup, _mapper)


# ── Getters (used by routes) ───────────────────────────────────────────────────

def get_loader()       -> CityDataLoader:    return _loader
def get_lookup()       -> CityLookupService: return _lookup
def get_mapper()       -> CityInfoMapper:    return _mapper
def get_city_handler() -> CityHandler:       return _city
