import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///yahtzee.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Where game sessions live: 'memory' (process-local) or 'sql'
    SESSION_STORE = os.environ.get('SESSION_STORE', 'memory')
    # Minimum players required before the host may start (never below 2)
    MIN_PLAYERS = int(os.environ.get('MIN_PLAYERS', '2'))
    # Comma separated list of allowed browser origins
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173',
        ).split(',')
        if origin.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
