from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Метрики для HTTP запросов
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Бизнес-метрики
users_registered_total = Counter('users_registered_total', 'Total registered users')
profile_updates_total = Counter('profile_updates_total', 'Total successful profile updates')
profile_update_errors_total = Counter(
    'profile_update_errors_total',
    'Rejected profile updates',
    ['kind']
)

def metrics_endpoint():
    """Endpoint для Prometheus метрик"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
