USER_BASE = '/users'
USER_GET = f'{USER_BASE}/{{user_id}}'
HEALTH = '/health'
