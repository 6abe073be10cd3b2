from ..settings import Settings

class DevelopmentSettings(Settings):
    base_url: str = "http://127.0.0.1:8848"
