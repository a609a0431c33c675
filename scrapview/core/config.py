import os

class Settings:
    # Upstream scrape endpoint
    SCRAPE_ENDPOINT: str = os.getenv("SCRAPE_ENDPOINT", "https://sample.chalcak.kr/scrap/go")
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # Classifier rule set: "full" or "legacy"
    CLASSIFIER_RULES: str = os.getenv("CLASSIFIER_RULES", "full").lower()

settings = Settings()
