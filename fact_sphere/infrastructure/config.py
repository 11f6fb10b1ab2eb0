"""Application configuration loaded from the environment."""

import logging
import os

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class FactSphereConfig(BaseModel):
    """Configuration for the fact client."""

    store_provider: str = "supabase"  # 'supabase' or 'memory'
    supabase_url: str = ""
    supabase_key: str = ""
    facts_table: str = "facts"
    timeout: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FactSphereConfig":
        """Create configuration from environment variables."""
        store_provider = os.getenv('FACT_STORE_PROVIDER', 'supabase').lower()
        supabase_url = os.getenv('SUPABASE_URL', '')
        supabase_key = os.getenv('SUPABASE_KEY', '')

        if store_provider == 'supabase':
            if not supabase_url:
                logger.warning("⚠️ SUPABASE_URL not found in environment variables")
            if not supabase_key:
                logger.warning("⚠️ SUPABASE_KEY not found in environment variables")
            else:
                logger.info(f"✅ Supabase key loaded: {len(supabase_key)} chars")
        else:
            logger.info(f"🗄️ Using '{store_provider}' fact store")

        return cls(
            store_provider=store_provider,
            supabase_url=supabase_url,
            supabase_key=supabase_key,
            facts_table=os.getenv('FACTS_TABLE', 'facts'),
            timeout=float(os.getenv('FACT_STORE_TIMEOUT', '10.0')),
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        )
