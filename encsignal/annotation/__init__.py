from .genes import NearestFeature, nearest
