"""Operator-facing message catalogue for the English and Arabic dashboards."""

from typing import Any

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "missing_rows": "CSV must have a header and at least one data row.",
        "missing_column": "Missing required column in CSV: {column}",
        "empty_number": "Row {row}: 'Apt #' cannot be empty.",
        "invalid_type": "Row {row}: Invalid 'Type' value \"{value}\".",
        "invalid_status": "Row {row}: Invalid 'Status' value \"{value}\".",
        "invalid_amount": "Row {row}: Invalid '{column}' value \"{value}\".",
        "empty_batch": "The uploaded file contains no apartment records.",
        "read_failed": "Failed to read the file.",
        "upload_success": "Apartment data updated successfully!",
    },
    "ar": {
        "missing_rows": "يجب أن يحتوي ملف CSV على صف رأس وصف بيانات واحد على الأقل.",
        "missing_column": "العمود المطلوب مفقود في ملف CSV: {column}",
        "empty_number": "الصف {row}: 'رقم الشقة' لا يمكن أن يكون فارغًا.",
        "invalid_type": "الصف {row}: قيمة \"النوع\" غير صالحة \"{value}\".",
        "invalid_status": "الصف {row}: قيمة \"الحالة\" غير صالحة \"{value}\".",
        "invalid_amount": "الصف {row}: قيمة \"{column}\" غير صالحة \"{value}\".",
        "empty_batch": "لا يحتوي الملف المرفوع على أي بيانات للشقق.",
        "read_failed": "فشل في قراءة الملف.",
        "upload_success": "تم تحديث بيانات الشقق بنجاح!",
    },
}

SUPPORTED_LOCALES = tuple(MESSAGES)


def render(code: str, locale: str = DEFAULT_LOCALE, **params: Any) -> str:
    """Render a catalogue message.

    Parameters
    ----------
    code : str
        Message key, e.g. ``"invalid_status"``.
    locale : str
        ``"en"`` or ``"ar"``. Unknown locales fall back to English.
    **params : Any
        Template placeholders (``row``, ``column``, ``value``).

    Returns
    -------
    str
        The rendered message.
    """
    catalogue = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    return catalogue[code].format(**params)
