from __future__ import annotations

from typing import NewType


# Locale code as it appears in a bundle file name, e.g. "messages_zh.properties"
Local = NewType("Local", str)

# No locale: selects the default bundle, "messages.properties"
LOCAL_NONE = Local("")

LOCAL_ar = Local("ar")
LOCAL_de = Local("de")
LOCAL_en = Local("en")
LOCAL_es = Local("es")
LOCAL_fr = Local("fr")
LOCAL_it = Local("it")
LOCAL_ja = Local("ja")
LOCAL_ko = Local("ko")
LOCAL_pt = Local("pt")
LOCAL_ru = Local("ru")
LOCAL_th = Local("th")
LOCAL_tr = Local("tr")
LOCAL_uk = Local("uk")
LOCAL_ur = Local("ur")
LOCAL_vi = Local("vi")
LOCAL_zh = Local("zh")
LOCAL_zh_CN = Local("zh-CN")
LOCAL_zh_TW = Local("zh-TW")
