"""Module for defining constants that include only imports from standard Python libraries."""
import os

IPLOCATE_API_KEY = os.getenv('IPLOCATE_API_KEY') or None
