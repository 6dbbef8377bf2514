"""
Language selection and localized value resolution.

Localized fields are stored as {en, hi, ur} bundles and resolved to a single
string for every response field, one field at a time.
"""

DEFAULT_LANGUAGE = 'en'
SUPPORTED_LANGUAGES = ('en', 'hi', 'ur')
RTL_LANGUAGES = ('ur',)
FALLBACK_ORDER = ('en', 'hi', 'ur')


def get_language_from_request(request):
    """
    ``lang`` query parameter first, then the Accept-Language header,
    then the default language.
    """
    query_params = getattr(request, 'query_params', None) or request.GET
    lang = query_params.get('lang')
    if lang in SUPPORTED_LANGUAGES:
        return lang

    accept_language = request.META.get('HTTP_ACCEPT_LANGUAGE', '')
    for entry in accept_language.split(','):
        code = entry.split(';')[0].strip().lower()
        for supported in SUPPORTED_LANGUAGES:
            if code.startswith(supported):
                return supported

    return DEFAULT_LANGUAGE


def localize(bundle, lang):
    if not bundle:
        return ''
    if bundle.get(lang):
        return bundle[lang]
    for fallback in FALLBACK_ORDER:
        if bundle.get(fallback):
            return bundle[fallback]
    return ''


def is_rtl(lang):
    return lang in RTL_LANGUAGES


def format_response(data, lang, message=None):
    return {
        'success': True,
        'data': data,
        'message': message,
        'lang': lang,
        'rtl': is_rtl(lang),
    }
