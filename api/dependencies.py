# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-25
# Description: dependencies.py
# -----------------------------------------------------------------------------
from functools import lru_cache

from api.AppContainer import app_container
from config.Config import Config
from geometry.MapView import MapView
from loader.GeoDatasetLoader import GeoDatasetLoader
from services.GeoExploreController import GeoExploreController
from services.GeoHealthService import GeoHealthService
from services.GeoSearchService import GeoSearchService

@lru_cache
def get_cfg() -> Config:
    return Config.from_env()
def get_health_service() -> GeoHealthService:
    # use the singleton service from the container
    return app_container.health_service
def get_search_service() -> GeoSearchService:
    # use the singleton service from the container
    return app_container.search_service

def get_explore_controller() -> GeoExploreController:
    # one controller owns the current result set and cursor
    return app_container.explore_controller

def get_dataset_loader() -> GeoDatasetLoader:
    return app_container.dataset_loader

def get_map_view() -> MapView:
    return app_container.map_view
