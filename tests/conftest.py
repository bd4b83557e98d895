# tests/conftest.py

import os

# Sem arquivos de log durante os testes
os.environ.setdefault("LOG_TO_FILE", "false")
