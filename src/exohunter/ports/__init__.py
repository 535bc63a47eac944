# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for catalog access and scene export.

Adapters implement these to handle different sources and file formats.
"""
from exohunter.ports.catalog_source import CatalogSource
from exohunter.ports.export import SceneExporter

__all__ = ["CatalogSource", "SceneExporter"]
