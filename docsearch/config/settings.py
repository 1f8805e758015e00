from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    tenant_id: str = "autolife"
    knowledge_dir: str = "./knowledge/autolife"

    max_chunk_chars: int = 1800

    search_top_k: int = 3
    overlap_weight: int = 2
    title_weight: int = 1
    substring_boost: int = 4

    # searchDocs tool
    tool_description: str = (
        "Retrieve company information (e.g., office hours, phone number, email, "
        "location, services)."
    )
    not_found_message: str = (
        "I couldn't find this in the provided documents. "
        "Do you want prices, location, opening hours, or services?"
    )

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
