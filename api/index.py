"""Vercel serverless entry point for the model catalog API."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from model_catalog.service import ModelCatalogService
from model_catalog.web.app import create_app

# Caches live for the lifetime of the serverless instance
app = create_app(service=ModelCatalogService.from_env())
