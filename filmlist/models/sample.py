"""Built-in sample catalog, used to seed the local store and as a load fallback."""
from typing import List

from filmlist.models.film import Film


def sample_films() -> List[Film]:
    """Return a fresh copy of the 8 sample films."""
    return [
        Film(1, "Soul Land", "Donghua", 265, "Sedang Ditonton", "2024-01-15",
             "Donghua adaptasi dari novel populer"),
        Film(2, "Battle Through The Heavens", "Donghua", 52, "Selesai", "2024-02-20",
             "Salah satu donghua terbaik"),
        Film(3, "The King's Avatar", "Donghua", 12, "Selesai", "2024-03-10",
             "Tentang pro gamer"),
        Film(4, "Mo Dao Zu Shi", "Donghua", 23, "Selesai", "2024-01-05",
             "Animasi dan cerita yang luar biasa"),
        Film(5, "Spirited Away", "Film", 1, "Selesai", "2024-02-14",
             "Masterpiece dari Studio Ghibli"),
        Film(6, "Perfect World", "Donghua", 156, "Sedang Ditonton", "2024-03-01",
             "Donghua dengan visual yang bagus"),
        Film(7, "Stellar Transformations", "Donghua", 48, "Rencana", None,
             "Masuk watchlist"),
        Film(8, "Swallowed Star", "Donghua", 78, "Ditunda", "2024-01-20",
             "Ditunda sementara"),
    ]
