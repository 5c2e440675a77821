"""
Localized criterion titles.

Scoring results carry stable identifiers (section, kind, measured value,
threshold); this module turns them into human-readable titles. English is the
default and is what the engine bakes into ``CriterionResult.title``. Other
languages are rendered on demand with ``localize``.
"""

from dataclasses import replace
from typing import Any, Dict

from .criteria import CriterionKind

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: Dict[str, Dict[str, Dict[str, str]]] = {
    "en": {
        "labels": {
            "linkedInUrl": "LinkedIn URL",
            "country": "Country",
            "headline": "Headline",
            "summary": "Summary",
            "experiences": "Experiences",
            "education": "Education",
            "skills": "Skills",
            "publications": "Publications",
            "languages": "Languages",
            "certificates": "Certifications",
            "honorsAwards": "Honors/Awards",
            "volunteer": "Volunteer experiences",
            "patents": "Patents",
            "testScores": "Test scores",
            "organizations": "Organizations",
            "featured": "Featured content",
            "projects": "Projects",
            "recommendations": "Recommendations",
            "causes": "Causes",
            "contactInfo": "Contact info",
        },
        "fields": {
            "description": "description",
        },
        "templates": {
            "absent": "{label}: not found",
            "presence.earned": "{label}: present",
            "presence.missed": "{label}: missing",
            "presence.field": "{label} with {field}: {value}",
            "presence.field.absent": "{label} with {field}: not found",
            "urlCustomization.earned": "Custom LinkedIn URL: {value}",
            "urlCustomization.missed": "No custom LinkedIn URL found",
            "urlCustomization.absent": "No custom LinkedIn URL found",
            "wordCountMin": "{label}: {value} words (min: {threshold})",
            "wordCountMin.absent": "{label}: not found (min: {threshold} words)",
            "arrayLengthMin": "{label}: {value} (min: {threshold})",
            "arrayLengthMin.absent": "{label}: not found (min: {threshold})",
            "keywordMatch": "{label}: {value} keywords matched",
            "emailPresence.earned": "{label}: email found",
            "emailPresence.missed": "{label}: no email found",
        },
    },
    "ar": {
        "labels": {
            "linkedInUrl": "رابط لينكد إن",
            "country": "البلد",
            "headline": "العنوان",
            "summary": "الملخص",
            "experiences": "الخبرات",
            "education": "التعليم",
            "skills": "المهارات",
            "publications": "المنشورات",
            "languages": "اللغات",
            "certificates": "الشهادات",
            "honorsAwards": "الجوائز والتكريمات",
            "volunteer": "العمل التطوعي",
            "patents": "براءات الاختراع",
            "testScores": "نتائج الاختبارات",
            "organizations": "المنظمات",
            "featured": "المحتوى المميز",
            "projects": "المشاريع",
            "recommendations": "التوصيات",
            "causes": "القضايا",
            "contactInfo": "معلومات الاتصال",
        },
        "fields": {
            "description": "وصف",
        },
        "templates": {
            "absent": "{label}: غير موجود",
            "presence.earned": "{label}: موجود",
            "presence.missed": "{label}: مفقود",
            "presence.field": "{label} مع {field}: {value}",
            "presence.field.absent": "{label} مع {field}: غير موجود",
            "urlCustomization.earned": "رابط لينكد إن مخصص: {value}",
            "urlCustomization.missed": "لم يتم العثور على رابط لينكد إن مخصص",
            "urlCustomization.absent": "لم يتم العثور على رابط لينكد إن مخصص",
            "wordCountMin": "{label}: {value} كلمات (الحد الأدنى: {threshold})",
            "wordCountMin.absent": "{label}: غير موجود (الحد الأدنى: {threshold} كلمات)",
            "arrayLengthMin": "{label}: {value} (الحد الأدنى: {threshold})",
            "arrayLengthMin.absent": "{label}: غير موجود (الحد الأدنى: {threshold})",
            "keywordMatch": "{label}: {value} كلمات مفتاحية مطابقة",
            "emailPresence.earned": "{label}: تم العثور على بريد إلكتروني",
            "emailPresence.missed": "{label}: لا يوجد بريد إلكتروني",
        },
    },
}


def supported_languages():
    return sorted(TRANSLATIONS)


def _table(language: str) -> Dict[str, Dict[str, str]]:
    return TRANSLATIONS.get(language, TRANSLATIONS[DEFAULT_LANGUAGE])


def template_key(kind: CriterionKind, value: Any, earned: bool, field: Any = None) -> str:
    """Pick the template identifier for a result's state."""
    base = kind.value
    if kind is CriterionKind.PRESENCE and field:
        return f"{base}.field.absent" if value is None else f"{base}.field"
    if kind in (CriterionKind.WORD_COUNT_MIN, CriterionKind.ARRAY_LENGTH_MIN):
        return f"{base}.absent" if value is None else base
    if kind is CriterionKind.URL_CUSTOMIZATION and value is None:
        return f"{base}.absent"
    if value is None:
        return "absent"
    if kind is CriterionKind.KEYWORD_MATCH:
        return base
    return f"{base}.earned" if earned else f"{base}.missed"


def render_title(result: Any, language: str = DEFAULT_LANGUAGE) -> str:
    """Render the title of a criterion result in ``language``.

    ``result`` only needs ``section``, ``kind``, ``value``, ``threshold``,
    ``field`` and ``point`` attributes. Unknown languages fall back to English,
    and keys missing from a language fall back to the English text.
    """
    table = _table(language)
    english = TRANSLATIONS[DEFAULT_LANGUAGE]
    key = template_key(result.kind, result.value, result.point > 0, result.field)
    template = table["templates"].get(key) or english["templates"][key]
    label = table["labels"].get(result.section) or english["labels"].get(result.section, result.section)
    field = None
    if result.field:
        field = table["fields"].get(result.field) or english["fields"].get(result.field, result.field)
    return template.format(label=label, field=field, value=result.value, threshold=result.threshold)


def localize(profile_score: Any, language: str) -> Any:
    """Return a copy of a ProfileScore with every title rendered in ``language``."""
    sections = []
    for section in profile_score.section_scores:
        criteria = tuple(replace(c, title=render_title(c, language)) for c in section.criteria)
        sections.append(replace(section, criteria=criteria))
    return replace(profile_score, section_scores=tuple(sections))
