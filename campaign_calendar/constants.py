"""Static locale data and default records for the campaign calendar."""

from __future__ import annotations

from typing import Dict, List

URGENCY_LABELS: Dict[str, str] = {
    "Very High": "Çok Yüksek",
    "High": "Yüksek",
    "Medium": "Orta",
    "Low": "Düşük",
}

TURKISH_MONTHS: List[str] = [
    "",
    "Ocak",
    "Şubat",
    "Mart",
    "Nisan",
    "Mayıs",
    "Haziran",
    "Temmuz",
    "Ağustos",
    "Eylül",
    "Ekim",
    "Kasım",
    "Aralık",
]

AVAILABLE_EMOJIS: List[str] = [
    "👨‍💼", "👩‍💼",
    "👨‍💻", "👩‍💻",
    "👨", "👩",
    "👱‍♂️", "👱‍♀️",
]

UNKNOWN_LABEL = "unknown"
UNASSIGNED_LABEL = "unassigned"

# User-facing messages
MSG_ASSIGNMENT_TITLE = "Görev Ataması Yapıldı"
MSG_EVENT_CREATED = "Kampanya oluşturuldu."
MSG_EVENT_CREATED_UNASSIGNED = "Kampanya oluşturuldu (Atama yok)."
MSG_EVENT_ASSIGNEE_UNKNOWN = "Kampanya oluşturuldu, ancak atanan personel bulunamadı; bildirim gönderilmedi."
MSG_EVENT_WRITE_FAILED = "Hata: Kampanya kaydedilemedi."
MSG_EVENT_DELETED = "Kampanya silindi."
MSG_EVENT_DELETE_FAILED = "Silme hatası."
MSG_EVENTS_DELETED = "Tüm kampanyalar silindi."
MSG_EMAIL_SENT = "✅ E-posta gönderildi!"
MSG_EMAIL_FALLBACK = "⚠️ E-posta gönderilemedi. Mail istemcisi açılıyor..."
MSG_DIRECTORY_WRITE_FAILED = "Hata oluştu."
MSG_ACCESS_UPDATED = "Erişim ayarları güncellendi."
MSG_SEEDED = "Veritabanı varsayılan verilerle dolduruldu."

DEFAULT_USERS: List[Dict[str, str]] = [
    {"id": "u1", "name": "Ahmet Yılmaz", "email": "ahmet@sirket.com", "avatar": "👨‍💻"},
    {"id": "u2", "name": "Ayşe Demir", "email": "ayse@sirket.com", "avatar": "👩‍💻"},
    {"id": "u3", "name": "Mehmet Öz", "email": "mehmet@sirket.com", "avatar": "👨‍💼"},
]

DEFAULT_DEPARTMENTS: List[Dict[str, str]] = [
    {"id": "d1", "name": "Pazarlama"},
    {"id": "d2", "name": "İnsan Kaynakları"},
    {"id": "d3", "name": "Bilgi Teknolojileri"},
    {"id": "d4", "name": "Satış"},
    {"id": "d5", "name": "Finans"},
]

# Day of the current month, title, urgency, assignee, department
DEFAULT_EVENTS: List[Dict[str, object]] = [
    {"id": "1", "day": 6, "title": "Kamera Arkası Çekimleri", "urgency": "Medium", "assignee_id": "u1", "department_id": "d1"},
    {"id": "2", "day": 8, "title": "Müşteri Anketi Analizi", "urgency": "High", "assignee_id": "u2", "department_id": "d1"},
    {"id": "3", "day": 14, "title": "Yaz İndirimi Lansmanı", "urgency": "Very High", "assignee_id": "u3", "department_id": "d4"},
    {"id": "4", "day": 17, "title": "Blog Yazısı: Destinasyonlar", "urgency": "Low", "assignee_id": "u1", "department_id": "d1"},
    {"id": "5", "day": 19, "title": "Kullanıcı Yorumları Derlemesi", "urgency": "Medium", "assignee_id": "u2", "department_id": "d4"},
    {"id": "6", "day": 22, "title": "Sürdürülebilirlik Raporu", "urgency": "Low", "assignee_id": "u3", "department_id": "d2"},
]

# Format: YYYY-MM-DD
TURKISH_HOLIDAYS: Dict[str, str] = {
    # 2024
    "2024-01-01": "Yılbaşı",
    "2024-04-09": "Ramazan Bayramı Arifesi",
    "2024-04-10": "Ramazan Bayramı 1. Gün",
    "2024-04-11": "Ramazan Bayramı 2. Gün",
    "2024-04-12": "Ramazan Bayramı 3. Gün",
    "2024-04-23": "Ulusal Egemenlik ve Çocuk Bayramı",
    "2024-05-01": "Emek ve Dayanışma Günü",
    "2024-05-19": "Atatürk'ü Anma, Gençlik ve Spor Bayramı",
    "2024-06-15": "Kurban Bayramı Arifesi",
    "2024-06-16": "Kurban Bayramı 1. Gün",
    "2024-06-17": "Kurban Bayramı 2. Gün",
    "2024-06-18": "Kurban Bayramı 3. Gün",
    "2024-06-19": "Kurban Bayramı 4. Gün",
    "2024-07-15": "Demokrasi ve Milli Birlik Günü",
    "2024-08-30": "Zafer Bayramı",
    "2024-10-28": "Cumhuriyet Bayramı Arifesi",
    "2024-10-29": "Cumhuriyet Bayramı",
    # 2025
    "2025-01-01": "Yılbaşı",
    "2025-03-29": "Ramazan Bayramı Arifesi",
    "2025-03-30": "Ramazan Bayramı 1. Gün",
    "2025-03-31": "Ramazan Bayramı 2. Gün",
    "2025-04-01": "Ramazan Bayramı 3. Gün",
    "2025-04-23": "Ulusal Egemenlik ve Çocuk Bayramı",
    "2025-05-01": "Emek ve Dayanışma Günü",
    "2025-05-19": "Atatürk'ü Anma, Gençlik ve Spor Bayramı",
    "2025-06-05": "Kurban Bayramı Arifesi",
    "2025-06-06": "Kurban Bayramı 1. Gün",
    "2025-06-07": "Kurban Bayramı 2. Gün",
    "2025-06-08": "Kurban Bayramı 3. Gün",
    "2025-06-09": "Kurban Bayramı 4. Gün",
    "2025-07-15": "Demokrasi ve Milli Birlik Günü",
    "2025-08-30": "Zafer Bayramı",
    "2025-10-28": "Cumhuriyet Bayramı Arifesi",
    "2025-10-29": "Cumhuriyet Bayramı",
    # 2026
    "2026-01-01": "Yılbaşı",
    "2026-03-19": "Ramazan Bayramı Arifesi",
    "2026-03-20": "Ramazan Bayramı 1. Gün",
    "2026-03-21": "Ramazan Bayramı 2. Gün",
    "2026-03-22": "Ramazan Bayramı 3. Gün",
    "2026-04-23": "Ulusal Egemenlik ve Çocuk Bayramı",
    "2026-05-01": "Emek ve Dayanışma Günü",
    "2026-05-19": "Atatürk'ü Anma, Gençlik ve Spor Bayramı",
    "2026-05-26": "Kurban Bayramı Arifesi",
    "2026-05-27": "Kurban Bayramı 1. Gün",
    "2026-05-28": "Kurban Bayramı 2. Gün",
    "2026-05-29": "Kurban Bayramı 3. Gün",
    "2026-05-30": "Kurban Bayramı 4. Gün",
    "2026-07-15": "Demokrasi ve Milli Birlik Günü",
    "2026-08-30": "Zafer Bayramı",
    "2026-10-28": "Cumhuriyet Bayramı Arifesi",
    "2026-10-29": "Cumhuriyet Bayramı",
}
