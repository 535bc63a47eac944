# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for catalog access and scene export.

External dependencies (urllib, json, csv, file I/O) are confined to this layer.
"""
from exohunter.adapters.json_catalog import JsonCatalogAdapter
from exohunter.adapters.exoplanet_api import ExoplanetApiAdapter
from exohunter.adapters.csv_exporter import CsvSceneExporter
from exohunter.adapters.json_exporter import JsonSceneExporter, build_scene_document

__all__ = [
    "JsonCatalogAdapter",
    "ExoplanetApiAdapter",
    "CsvSceneExporter",
    "JsonSceneExporter",
    "build_scene_document",
]
