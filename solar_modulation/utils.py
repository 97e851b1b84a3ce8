from importlib import resources as importlib_resources
import os


def get_resources_dir():
    return os.path.join(
        str(importlib_resources.files("solar_modulation")), "resources"
    )
