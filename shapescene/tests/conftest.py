
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "group_shape: marks tests related to shape functionality")
    config.addinivalue_line("markers", "group_polygon: marks tests related to polygon functionality")
    config.addinivalue_line("markers", "group_circle: marks tests related to circle functionality")
    config.addinivalue_line("markers", "group_validation: marks tests related to dimension validation")
    config.addinivalue_line("markers", "group_scene: marks tests related to scene aggregation")
    config.addinivalue_line("markers", "group_settings: marks tests related to settings and logging setup")
