"""
Скрипты для подготовки данных к экспериментам кластеризации.

Модули:
- generate_datasets: генерация синтетических датасетов с эталонными центрами
"""
