from pathlib import Path

# Repo-root conventional directories/files (overrideable via --config)
CONFIG_DIR = Path("configs")
STORE_CONFIG_FILE = CONFIG_DIR / "store.yaml"

# Defaults matching the existing deployment
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 27017
DEFAULT_DATABASE = "brigade_matchmaker"
DEFAULT_COLLECTION = "projecttaxonomies"

# Environment variable overrides
ENV_BACKEND = "TAXONOMY_STORE_BACKEND"
ENV_HOST = "TAXONOMY_MONGO_HOST"
ENV_PORT = "TAXONOMY_MONGO_PORT"
ENV_DATABASE = "TAXONOMY_MONGO_DB"
ENV_COLLECTION = "TAXONOMY_COLLECTION"
