from dataclasses import dataclass
import os
from dotenv import load_dotenv

@dataclass
class Config:
    init_delay: float
    fetch_delay: float
    update_delay: float
    log_path: str
    audit_file: bool
    audit_console: bool

    def __post_init__(self):
        for name in ("init_delay", "fetch_delay", "update_delay"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

def load_config():
    load_dotenv(override=True)
    return Config(
        init_delay=float(os.getenv("DOCPROXY_INIT_DELAY", 1.0)),
        fetch_delay=float(os.getenv("DOCPROXY_FETCH_DELAY", 0.5)),
        update_delay=float(os.getenv("DOCPROXY_UPDATE_DELAY", 0.3)),
        log_path=os.getenv("DOCPROXY_LOG_PATH", "docproxy_audit.log"),
        audit_file=os.getenv("DOCPROXY_AUDIT_FILE", "false").lower() == "true",
        audit_console=os.getenv("DOCPROXY_AUDIT_CONSOLE", "true").lower() == "true",
    )
