import os
import tempfile

# La configuración se lee al importar vsconnect; se fija antes de cualquier import
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="vsconnect-uploads-"))
os.environ.setdefault("DATABASE_CREATE_TABLES", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
