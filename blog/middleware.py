import functools
import logging
import re

from django.conf import settings

logger = logging.getLogger(__name__)

BANNER_PATH = '/curl-response'
DEFAULT_CLI_TOKENS = ('curl', 'wget', 'httpie')

# Браузер всегда шлёт Sec-Fetch-* при навигации, curl/wget — никогда
FETCH_SIGNAL_HEADER = 'Sec-Fetch-Site'


@functools.lru_cache(maxsize=16)
def cli_pattern(tokens):
    alternatives = '|'.join(re.escape(t) for t in tokens if t)
    return re.compile(r'\b(%s)\b' % alternatives, re.IGNORECASE)


def is_cli_user_agent(user_agent, tokens=DEFAULT_CLI_TOKENS):
    """True, если в User-Agent есть токен консольного клиента целым словом."""
    tokens = tuple(tokens)
    if not user_agent or not any(tokens):
        return False
    return cli_pattern(tokens).search(user_agent) is not None


def should_rewrite(user_agent, has_fetch_signal, tokens=DEFAULT_CLI_TOKENS):
    return is_cli_user_agent(user_agent, tokens) and not has_fetch_signal


class CliBannerMiddleware:
    """
    Консольным клиентам (curl, wget, httpie) вместо страницы отдаём баннер.
    Это внутренний rewrite: меняем только path_info, адрес у клиента тот же,
    редиректа нет. Работает для любого пути и любого метода.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.tokens = tuple(getattr(settings, 'CLI_USER_AGENTS', DEFAULT_CLI_TOKENS))

    def __call__(self, request):
        if self.is_cli_request(request):
            logger.debug('CLI client on %s, rewriting to %s', request.path, BANNER_PATH)
            request.path_info = BANNER_PATH
        return self.get_response(request)

    def is_cli_request(self, request):
        # Ошибка разбора не должна ломать запрос — считаем, что это браузер
        try:
            user_agent = request.headers.get('User-Agent', '')
            has_fetch_signal = FETCH_SIGNAL_HEADER in request.headers
            return should_rewrite(user_agent, has_fetch_signal, self.tokens)
        except Exception:
            logger.warning('Could not classify User-Agent, passing through', exc_info=True)
            return False
