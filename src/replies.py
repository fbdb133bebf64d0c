"""Texts sent back to the user. The bot talks to its users in Arabic."""

from dataclasses import dataclass

from src.models import EpisodeRequest, TitleInfo
from src.resolver import FailureReason, Resolution
from src.utils import humanize_slug

NOT_AVAILABLE = "غير متوفر"
NO_DESCRIPTION = "لا يوجد وصف متاح."


@dataclass(frozen=True)
class Reply:
    """A message to send: plain text, or text with a single URL button."""

    text: str
    button_url: str | None = None


def help_reply() -> Reply:
    return Reply(
        "للبحث عن أنمي، أرسل اسمه بالإنجليزية (مثال: One Piece).\n\n"
        "لطلب حلقة معينة، أرسل اسم الأنمي متبوعًا برقم الحلقة (مثال: One Piece 3)"
    )


def title_info_replies(info: TitleInfo) -> list[Reply]:
    text = (
        f"📌 *{info.title}* \n\n"
        f"⭐ التقييم: {info.rating or NOT_AVAILABLE}\n"
        f"📅 الحالة: {info.status or NOT_AVAILABLE}\n"
        f"🎬 الاستوديو: {info.studio or NOT_AVAILABLE}\n"
        f"✍ المؤلف: {info.author or NOT_AVAILABLE}\n"
        f"🔞 التصنيف العمري: {info.age_rating or NOT_AVAILABLE}\n\n"
        f"📜 القصة:\n{info.description or NO_DESCRIPTION}"
    )
    return [Reply(text), Reply("عرض الحلقات على الموقع", button_url=info.url)]


def title_not_found_reply(slug: str) -> Reply:
    return Reply(f"❌ لم أستطع العثور على الأنمي باسم: {slug}. تأكد من إدخال الاسم الإنجليزي الصحيح.")


def episode_replies(resolution: Resolution, episode_url: str) -> list[Reply]:
    """Renders a resolved episode as one block per source followed by a button to the site."""
    if not resolution.ok:
        return [episode_failure_reply(resolution)]

    request = resolution.request
    text = f"🎥 روابط مشاهدة *{humanize_slug(request.slug)}* - الحلقة *{request.episode}*:\n\n"
    for source in resolution.sources:
        text += f"💠 *{source.quality}*:\n{source.url}\n\n"
    return [Reply(text), Reply("مشاهدة الحلقة على الموقع", button_url=episode_url)]


def episode_failure_reply(resolution: Resolution) -> Reply:
    """Apology for a failed resolution. Unparsable and empty source lists read the same."""
    if resolution.reason is FailureReason.NO_PLAYABLE_SOURCES:
        return Reply("❌ لم يتم العثور على أي روابط مشاهدة بجودة محددة في ملف المشغل.")
    return episode_error_reply(resolution.request)


def episode_error_reply(request: EpisodeRequest) -> Reply:
    return Reply(
        f"❌ حدث خطأ أثناء جلب الحلقة رقم {request.episode} للأنمي {humanize_slug(request.slug)}. "
        "قد تكون الحلقة غير موجودة أو هناك مشكلة في الاستخراج."
    )


def service_unavailable_reply() -> Reply:
    return Reply("❌ الخدمة غير متاحة حاليًا. حاول مرة أخرى لاحقًا.")
