from .base import MISSING, ParameterSource, StaticDataStore, OutputChannel
from .host import ItemParameters, InMemoryStaticData, JsonFileStaticData, ListOutputChannel
