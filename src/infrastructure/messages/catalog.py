from __future__ import annotations

# Templates are Jinja2 sources keyed by "<locale>/<message key>".
# Every locale must define the keys of DEFAULT_LOCALE; missing keys fall back to it.

DEFAULT_LOCALE = "ja"

_JA: dict[str, str] = {
    "separator": "、",
    "metric/conception_rate": "受胎率",
    "metric/avg_days_open": "平均空胎日数",
    "metric/avg_calving_interval": "平均分娩間隔",
    "metric/ai_per_conception": "受胎あたりAI回数",
    "insight/no_events": "期間内に繁殖イベントがありません",
    "insight/insufficient_data": "指標データが不足しているため、詳細な分析ができません",
    "insight/conception_rate_good": "受胎率が良好です（60%以上）",
    "insight/conception_rate_standard": "受胎率は標準レベルです",
    "insight/conception_rate_needs_improvement": "受胎率の改善が必要です（40%未満）",
    "insight/days_open_well_managed": "空胎日数が適切に管理されています（90日以下）",
    "insight/days_open_acceptable": "空胎日数は許容範囲内です",
    "insight/days_open_needs_shortening": "空胎日数の短縮が必要です（120日超過）",
    "insight/ai_efficiency_good": "人工授精の効率が良好です（1.5回以下）",
    "insight/ai_efficiency_standard": "人工授精の効率は標準レベルです",
    "insight/ai_efficiency_needs_improvement": "人工授精の効率改善が必要です（2.0回超過）",
    "trend/improving": "{{ metrics }}が改善傾向にあります",
    "trend/declining": "{{ metrics }}が悪化傾向にあります",
    "trend/stable": "{{ metrics }}が安定しています",
    "trend/unknown": "{{ metrics }}は比較できるデータがありません",
    "trend/no_change": "トレンドの変化が検出されませんでした",
    "trend/insufficient_data": "データ不足のためトレンドを分析できません",
    "recommendation/collect_more_data": "より多くのデータを収集してください",
    "recommendation/improving": "現在の管理方法を継続してください",
    "recommendation/improving_metrics": (
        "{{ metrics }}の改善要因を分析し、他にも適用できないか検討してください"
    ),
    "recommendation/declining": "管理方法の見直しが必要です",
    "recommendation/declining_metrics": "{{ metrics }}の悪化要因を特定し、対策を講じてください",
    "recommendation/stable": "現在の管理レベルを維持してください",
    "recommendation/stable_next": "さらなる改善のための新たなアプローチを検討してください",
    "recommendation/mixed": "指標ごとの個別分析が必要です",
    "recommendation/mixed_next": (
        "改善している指標と悪化している指標の要因を詳しく調査してください"
    ),
    "direction/improving": "改善",
    "direction/declining": "悪化",
    "direction/stable": "安定",
    "direction/mixed": "混合",
    "summary/insufficient_data": "データ不足のためトレンド分析ができません",
    "summary/trend": (
        "{{ months }}ヶ月間の分析結果: 全体的に{{ direction }}傾向。"
        "信頼度: {{ confidence }}。{{ first_insight }}"
    ),
    "key_change/conception_rate": (
        "受胎率が{% if difference > 0 %}向上{% else %}低下{% endif %}しました"
        " ({{ '%.1f' | format(magnitude) }}%)"
    ),
    "key_change/avg_days_open": (
        "平均空胎日数が{% if difference < 0 %}短縮{% else %}延長{% endif %}しました"
        " ({{ '%.1f' | format(magnitude) }}日)"
    ),
    "key_change/ai_per_conception": (
        "受胎1回あたりのAI回数が{% if difference < 0 %}減少{% else %}増加{% endif %}しました"
        " ({{ '%.1f' | format(magnitude) }}回)"
    ),
}

_ES: dict[str, str] = {
    "separator": ", ",
    "metric/conception_rate": "tasa de concepción",
    "metric/avg_days_open": "días abiertos promedio",
    "metric/avg_calving_interval": "intervalo entre partos promedio",
    "metric/ai_per_conception": "servicios por concepción",
    "insight/no_events": "No hay eventos reproductivos en el período",
    "insight/insufficient_data": "Datos insuficientes para un análisis detallado",
    "insight/conception_rate_good": "La tasa de concepción es buena (60% o más)",
    "insight/conception_rate_standard": "La tasa de concepción está en un nivel estándar",
    "insight/conception_rate_needs_improvement": (
        "La tasa de concepción necesita mejorar (menos de 40%)"
    ),
    "insight/days_open_well_managed": "Los días abiertos están bien controlados (90 días o menos)",
    "insight/days_open_acceptable": "Los días abiertos están en un rango aceptable",
    "insight/days_open_needs_shortening": "Es necesario reducir los días abiertos (más de 120 días)",
    "insight/ai_efficiency_good": "La eficiencia de la inseminación es buena (1.5 o menos)",
    "insight/ai_efficiency_standard": "La eficiencia de la inseminación está en nivel estándar",
    "insight/ai_efficiency_needs_improvement": (
        "La eficiencia de la inseminación necesita mejorar (más de 2.0)"
    ),
    "trend/improving": "Mejora en: {{ metrics }}",
    "trend/declining": "Empeora en: {{ metrics }}",
    "trend/stable": "Estable en: {{ metrics }}",
    "trend/unknown": "Sin datos comparables para: {{ metrics }}",
    "trend/no_change": "No se detectaron cambios de tendencia",
    "trend/insufficient_data": "Datos insuficientes para analizar la tendencia",
    "recommendation/collect_more_data": "Registre más eventos reproductivos",
    "recommendation/improving": "Continúe con el manejo actual",
    "recommendation/improving_metrics": (
        "Analice qué impulsó la mejora en {{ metrics }} y evalúe aplicarlo en otras áreas"
    ),
    "recommendation/declining": "Es necesario revisar el manejo reproductivo",
    "recommendation/declining_metrics": (
        "Identifique las causas del deterioro en {{ metrics }} y tome medidas"
    ),
    "recommendation/stable": "Mantenga el nivel de manejo actual",
    "recommendation/stable_next": "Considere nuevas estrategias para seguir mejorando",
    "recommendation/mixed": "Se requiere un análisis individual por indicador",
    "recommendation/mixed_next": (
        "Investigue las causas de los indicadores que mejoran y de los que empeoran"
    ),
    "direction/improving": "de mejora",
    "direction/declining": "de deterioro",
    "direction/stable": "estable",
    "direction/mixed": "mixta",
    "summary/insufficient_data": "Datos insuficientes para el análisis de tendencia",
    "summary/trend": (
        "Análisis de {{ months }} meses: tendencia general {{ direction }}. "
        "Confianza: {{ confidence }}. {{ first_insight }}"
    ),
    "key_change/conception_rate": (
        "La tasa de concepción {% if difference > 0 %}subió{% else %}bajó{% endif %}"
        " ({{ '%.1f' | format(magnitude) }}%)"
    ),
    "key_change/avg_days_open": (
        "Los días abiertos promedio {% if difference < 0 %}bajaron{% else %}subieron{% endif %}"
        " ({{ '%.1f' | format(magnitude) }} días)"
    ),
    "key_change/ai_per_conception": (
        "Los servicios por concepción {% if difference < 0 %}bajaron{% else %}subieron{% endif %}"
        " ({{ '%.1f' | format(magnitude) }})"
    ),
}

_EN: dict[str, str] = {
    "separator": ", ",
    "metric/conception_rate": "conception rate",
    "metric/avg_days_open": "average days open",
    "metric/avg_calving_interval": "average calving interval",
    "metric/ai_per_conception": "AI per conception",
    "insight/no_events": "No breeding events in period",
    "insight/insufficient_data": "Not enough metric data for a detailed analysis",
    "insight/conception_rate_good": "Conception rate is good (60% or higher)",
    "insight/conception_rate_standard": "Conception rate is at a standard level",
    "insight/conception_rate_needs_improvement": "Conception rate needs improvement (below 40%)",
    "insight/days_open_well_managed": "Days open are well managed (90 days or less)",
    "insight/days_open_acceptable": "Days open are within an acceptable range",
    "insight/days_open_needs_shortening": "Days open need shortening (over 120 days)",
    "insight/ai_efficiency_good": "AI efficiency is good (1.5 or fewer per conception)",
    "insight/ai_efficiency_standard": "AI efficiency is at a standard level",
    "insight/ai_efficiency_needs_improvement": "AI efficiency needs improvement (over 2.0)",
    "trend/improving": "Improving: {{ metrics }}",
    "trend/declining": "Declining: {{ metrics }}",
    "trend/stable": "Stable: {{ metrics }}",
    "trend/unknown": "No comparable data: {{ metrics }}",
    "trend/no_change": "No trend changes detected",
    "trend/insufficient_data": "Not enough data to analyze the trend",
    "recommendation/collect_more_data": "Record more breeding events",
    "recommendation/improving": "Keep the current management practices",
    "recommendation/improving_metrics": (
        "Review what drove the improvement in {{ metrics }} and apply it elsewhere"
    ),
    "recommendation/declining": "Management practices need review",
    "recommendation/declining_metrics": "Find the causes behind {{ metrics }} and act on them",
    "recommendation/stable": "Maintain the current management level",
    "recommendation/stable_next": "Consider new approaches for further improvement",
    "recommendation/mixed": "Each indicator needs individual analysis",
    "recommendation/mixed_next": "Investigate the drivers of improving and declining indicators",
    "direction/improving": "improving",
    "direction/declining": "declining",
    "direction/stable": "stable",
    "direction/mixed": "mixed",
    "summary/insufficient_data": "Not enough data for trend analysis",
    "summary/trend": (
        "{{ months }}-month analysis: overall {{ direction }} trend. "
        "Confidence: {{ confidence }}. {{ first_insight }}"
    ),
    "key_change/conception_rate": (
        "Conception rate {% if difference > 0 %}rose{% else %}fell{% endif %}"
        " ({{ '%.1f' | format(magnitude) }}%)"
    ),
    "key_change/avg_days_open": (
        "Average days open {% if difference < 0 %}shortened{% else %}lengthened{% endif %}"
        " ({{ '%.1f' | format(magnitude) }} days)"
    ),
    "key_change/ai_per_conception": (
        "AI per conception {% if difference < 0 %}decreased{% else %}increased{% endif %}"
        " ({{ '%.1f' | format(magnitude) }})"
    ),
}

CATALOGS: dict[str, dict[str, str]] = {"ja": _JA, "es": _ES, "en": _EN}


def flatten() -> dict[str, str]:
    return {
        f"{locale}/{key}": source
        for locale, messages in CATALOGS.items()
        for key, source in messages.items()
    }
