"""
Presentation strings for diagnostics and recommendations (Indonesian).

The rule logic in ``diagnostics`` and ``recommendations`` only refers to the
keys below; replacing these tables localizes the output. Placeholders are
filled with ``str.format``.
"""

from .models import MatchType

ANALYSIS_MESSAGES = {
    "exact_and_near": (
        "Ditemukan {exact} kalimat yang identik dan {near} kalimat yang sangat mirip dengan dokumen referensi. "
        "Kemungkinan besar terjadi copy-paste langsung, diperlukan penulisan ulang secara menyeluruh."
    ),
    "exact_only": (
        "Ditemukan {exact} kalimat yang identik dengan dokumen referensi. "
        "Kemungkinan besar terjadi copy-paste langsung, diperlukan penulisan ulang secara menyeluruh."
    ),
    "near_only": (
        "Ditemukan {near} kalimat dengan susunan kata yang mirip dengan dokumen referensi. "
        "Parafrase perlu diperbaiki agar tulisan lebih orisinal."
    ),
    "clean": (
        "Tidak ditemukan kalimat yang identik atau sangat mirip dengan dokumen referensi. "
        "Tulisan Anda menunjukkan orisinalitas yang baik."
    ),
}

SUGGESTION_TEMPLATES = {
    MatchType.EXACT: "\n".join([
        "Kalimat ini {similarity}% identik dengan sumber referensi.",
        "Tulis ulang sepenuhnya dengan kata-kata Anda sendiri.",
        "Ubah struktur kalimat (aktif <-> pasif) dan gunakan sinonim.",
        "Jika kutipan langsung memang diperlukan, gunakan tanda kutip dan cantumkan sumbernya.",
    ]),
    MatchType.NEAR: "\n".join([
        "Kalimat ini {similarity}% mirip dengan sumber referensi.",
        "Perbaiki parafrase dengan mengganti pilihan kata dan urutan informasi.",
        "Tambahkan analisis atau interpretasi Anda sendiri.",
        "Cantumkan sumber referensi yang digunakan.",
    ]),
}

RECOMMENDATION_MESSAGES = {
    "diagnostic": {
        "title": "Analisis AI: {total_issues} Kalimat Bermasalah",
        "description": "{analysis}",
        "actions": [
            "Tulis ulang semua kalimat yang teridentifikasi sebagai exact match",
            "Perbaiki parafrase pada kalimat yang teridentifikasi sebagai near match",
            "Gunakan saran perbaikan per kalimat sebagai panduan",
            "Periksa kembali dokumen setelah revisi",
        ],
    },
    "rewrite_comprehensive": {
        "title": "Penulisan Ulang Menyeluruh Diperlukan",
        "description": (
            "Tingkat kemiripan {similarity}% menunjukkan sebagian besar konten berasal dari sumber lain. "
            "Dokumen perlu ditulis ulang secara menyeluruh sebelum dikumpulkan."
        ),
        "actions": [
            "Baca ulang sumber, tutup dokumennya, lalu tulis ulang dengan pemahaman sendiri",
            "Susun ulang kerangka dan alur pembahasan",
            "Tambahkan kutipan dan daftar pustaka untuk setiap sumber",
            "Kembangkan argumen dan analisis pribadi",
        ],
    },
    "improve_paraphrase": {
        "title": "Perbaiki Teknik Parafrase",
        "description": (
            "Tingkat kemiripan {similarity}% menunjukkan banyak bagian yang hanya sedikit diubah dari sumber. "
            "Tingkatkan kualitas parafrase pada bagian-bagian tersebut."
        ),
        "actions": [
            "Ganti kata kunci dengan sinonim yang tepat",
            "Ubah struktur kalimat (aktif <-> pasif)",
            "Pecah kalimat panjang menjadi beberapa kalimat pendek",
            "Cantumkan sumber untuk setiap ide yang dipinjam",
        ],
    },
    "optimize_originality": {
        "title": "Optimalkan Orisinalitas",
        "description": (
            "Tingkat kemiripan {similarity}% masih dalam batas wajar, namun beberapa bagian dapat "
            "dibuat lebih orisinal."
        ),
        "actions": [
            "Tinjau bagian dengan kemiripan tertinggi",
            "Tambahkan sudut pandang dan contoh Anda sendiri",
            "Pastikan semua kutipan sudah memiliki sitasi",
        ],
    },
    "maintain_standard": {
        "title": "Pertahankan Standar Orisinalitas",
        "description": (
            "Tingkat kemiripan {similarity}% menunjukkan dokumen Anda orisinal. "
            "Pertahankan praktik penulisan yang baik ini."
        ),
        "actions": [
            "Tetap cantumkan sumber untuk setiap referensi",
            "Lakukan pemeriksaan ulang setelah revisi besar",
        ],
    },
    "vary_structure": {
        "title": "Variasikan Struktur Kalimat",
        "description": (
            "Kemiripan frasa (n-gram) rata-rata {ngram}% lebih dominan daripada metode lain. "
            "Banyak rangkaian kata yang sama dengan sumber referensi."
        ),
        "actions": [
            "Ubah urutan kata dan frasa dalam kalimat",
            "Gunakan kata penghubung dan transisi yang berbeda",
            "Gabungkan atau pecah kalimat untuk membentuk struktur baru",
        ],
    },
    "stop_copy_paste": {
        "title": "Hentikan Copy-Paste Langsung",
        "description": (
            "Kecocokan fingerprint rata-rata {fingerprint}% menunjukkan adanya blok teks yang disalin "
            "kata per kata dari sumber referensi."
        ),
        "actions": [
            "Hapus semua blok teks yang disalin langsung",
            "Tulis ulang bagian tersebut dengan bahasa sendiri",
            "Gunakan tanda kutip dan sitasi untuk kutipan langsung yang memang diperlukan",
        ],
    },
    "expand_content": {
        "title": "Kembangkan Konten",
        "description": (
            "Dokumen hanya berisi {word_count} kata. Dokumen yang pendek cenderung menunjukkan "
            "kemiripan lebih tinggi terhadap referensi yang sama."
        ),
        "actions": [
            "Tambahkan pembahasan dan analisis yang lebih mendalam",
            "Sertakan contoh, data, atau studi kasus",
            "Kembangkan kesimpulan dengan pendapat Anda sendiri",
        ],
    },
}
