"""Localized answer templates for the offline mock generator.

Every string may reference ``{vessel_id}``. Operational figures (85% capacity,
3 berths) are fixed placeholders, not derived from the dataset.
"""

from __future__ import annotations

from dataclasses import dataclass

from portus_agent.agent.language import Language


@dataclass(frozen=True, slots=True)
class MockTemplate:
    plan: tuple[str, ...]
    recommendations: tuple[tuple[str, str, float], ...]
    explain: str
    thinking: str
    vessel_observation: str
    berth_observation: str
    final: str


MOCK_TEMPLATES: dict[Language, MockTemplate] = {
    Language.ENGLISH: MockTemplate(
        plan=(
            "Analyzed current port operations and vessel status",
            "Identified potential disruptions and their impacts",
            "Generated recommendations based on operational data",
        ),
        recommendations=(
            ("Monitor {vessel_id} closely for any delays", "Prevent cascading delays across port operations", 0.85),
            ("Prepare alternative berth assignments", "Reduce waiting time by 2-3 hours", 0.75),
        ),
        explain=(
            "Based on the current port operations data, I've analyzed the situation for {vessel_id}. "
            "The vessel appears to be on schedule, but I recommend monitoring weather conditions and "
            "preparing contingency plans. The port is operating at 85% capacity with good berth availability."
        ),
        thinking="Analyzing vessel status and port conditions...",
        vessel_observation="{vessel_id} is currently on schedule with no delays reported",
        berth_observation="Port operating at 85% capacity with 3 berths available",
        final="Generated recommendations based on current operational status",
    ),
    Language.CHINESE: MockTemplate(
        plan=(
            "分析了当前港口运营和船舶状态",
            "识别了潜在的中断及其影响",
            "基于运营数据生成建议",
        ),
        recommendations=(
            ("密切监控 {vessel_id} 的任何延误", "防止港口运营中的连锁延误", 0.85),
            ("准备替代泊位分配", "减少等待时间2-3小时", 0.75),
        ),
        explain=(
            "基于当前港口运营数据，我已经分析了 {vessel_id} 的情况。该船舶似乎按计划运行，"
            "但我建议监控天气条件并准备应急计划。港口以85%的容量运营，泊位可用性良好。"
        ),
        thinking="分析船舶状态和港口条件...",
        vessel_observation="{vessel_id} 目前按计划运行，无延误报告",
        berth_observation="港口以85%的容量运营，有3个泊位可用",
        final="基于当前运营状态生成建议",
    ),
    Language.SPANISH: MockTemplate(
        plan=(
            "Analicé las operaciones portuarias actuales y el estado de los buques",
            "Identifiqué interrupciones potenciales y sus impactos",
            "Generé recomendaciones basadas en datos operativos",
        ),
        recommendations=(
            ("Monitorear de cerca {vessel_id} por cualquier retraso", "Prevenir retrasos en cascada en las operaciones portuarias", 0.85),
            ("Preparar asignaciones alternativas de amarre", "Reducir el tiempo de espera en 2-3 horas", 0.75),
        ),
        explain=(
            "Basándome en los datos actuales de operaciones portuarias, he analizado la situación para {vessel_id}. "
            "El buque parece estar en horario, pero recomiendo monitorear las condiciones climáticas y preparar "
            "planes de contingencia. El puerto opera al 85% de capacidad con buena disponibilidad de amarre."
        ),
        thinking="Analizando el estado del buque y las condiciones del puerto...",
        vessel_observation="{vessel_id} está actualmente en horario sin retrasos reportados",
        berth_observation="Puerto operando al 85% de capacidad con 3 amarraderos disponibles",
        final="Generé recomendaciones basadas en el estado operativo actual",
    ),
    Language.FRENCH: MockTemplate(
        plan=(
            "Analysé les opérations portuaires actuelles et l'état des navires",
            "Identifié les perturbations potentielles et leurs impacts",
            "Généré des recommandations basées sur les données opérationnelles",
        ),
        recommendations=(
            ("Surveiller de près {vessel_id} pour tout retard", "Prévenir les retards en cascade dans les opérations portuaires", 0.85),
            ("Préparer des affectations d'amarrage alternatives", "Réduire le temps d'attente de 2-3 heures", 0.75),
        ),
        explain=(
            "Basé sur les données actuelles des opérations portuaires, j'ai analysé la situation pour {vessel_id}. "
            "Le navire semble être à l'heure, mais je recommande de surveiller les conditions météorologiques et de "
            "préparer des plans de contingence. Le port fonctionne à 85% de sa capacité avec une bonne "
            "disponibilité des postes d'amarrage."
        ),
        thinking="Analyse de l'état du navire et des conditions portuaires...",
        vessel_observation="{vessel_id} est actuellement à l'heure sans retard signalé",
        berth_observation="Port fonctionnant à 85% de capacité avec 3 postes d'amarrage disponibles",
        final="Généré des recommandations basées sur l'état opérationnel actuel",
    ),
    Language.GERMAN: MockTemplate(
        plan=(
            "Analysierte aktuelle Hafenoperationen und Schiffsstatus",
            "Identifizierte potenzielle Störungen und deren Auswirkungen",
            "Generierte Empfehlungen basierend auf operativen Daten",
        ),
        recommendations=(
            ("{vessel_id} eng auf Verzögerungen überwachen", "Kaskadierte Verzögerungen in Hafenoperationen verhindern", 0.85),
            ("Alternative Liegeplatzzuweisungen vorbereiten", "Wartezeit um 2-3 Stunden reduzieren", 0.75),
        ),
        explain=(
            "Basierend auf aktuellen Hafenoperationsdaten habe ich die Situation für {vessel_id} analysiert. "
            "Das Schiff scheint pünktlich zu sein, aber ich empfehle, die Wetterbedingungen zu überwachen und "
            "Notfallpläne vorzubereiten. Der Hafen arbeitet mit 85% Kapazität und guter Liegeplatzverfügbarkeit."
        ),
        thinking="Analysiere Schiffsstatus und Hafenbedingungen...",
        vessel_observation="{vessel_id} ist derzeit pünktlich ohne gemeldete Verzögerungen",
        berth_observation="Hafen arbeitet mit 85% Kapazität, 3 Liegeplätze verfügbar",
        final="Empfehlungen basierend auf aktuellem Betriebsstatus generiert",
    ),
    Language.JAPANESE: MockTemplate(
        plan=(
            "現在の港湾運営と船舶状況を分析",
            "潜在的な混乱とその影響を特定",
            "運営データに基づく推奨事項を生成",
        ),
        recommendations=(
            ("{vessel_id} の遅延を密接に監視", "港湾運営での連鎖的な遅延を防止", 0.85),
            ("代替バース割り当てを準備", "待機時間を2-3時間短縮", 0.75),
        ),
        explain=(
            "現在の港湾運営データに基づき、{vessel_id} の状況を分析しました。船舶は予定通りに運行しているようですが、"
            "気象条件を監視し、緊急計画を準備することをお勧めします。港湾は85%の容量で運営され、良好なバース利用可能性があります。"
        ),
        thinking="船舶状況と港湾条件を分析中...",
        vessel_observation="{vessel_id} は現在遅延なく予定通り",
        berth_observation="港湾は85%の容量で運営、3つのバースが利用可能",
        final="現在の運営状況に基づく推奨事項を生成",
    ),
    Language.KOREAN: MockTemplate(
        plan=(
            "현재 항만 운영 및 선박 상태 분석",
            "잠재적 중단 및 영향 식별",
            "운영 데이터 기반 권장사항 생성",
        ),
        recommendations=(
            ("{vessel_id} 지연 상황을 면밀히 모니터링", "항만 운영에서 연쇄적 지연 방지", 0.85),
            ("대체 선석 배정 준비", "대기 시간 2-3시간 단축", 0.75),
        ),
        explain=(
            "현재 항만 운영 데이터를 바탕으로 {vessel_id}의 상황을 분석했습니다. 선박은 일정대로 운항하고 있는 것으로 "
            "보이지만, 기상 조건을 모니터링하고 비상 계획을 준비하는 것을 권장합니다. 항만은 85% 용량으로 운영되며 "
            "선석 가용성이 양호합니다."
        ),
        thinking="선박 상태 및 항만 조건 분석 중...",
        vessel_observation="{vessel_id}는 현재 지연 없이 일정대로",
        berth_observation="항만 85% 용량 운영, 3개 선석 이용 가능",
        final="현재 운영 상태 기반 권장사항 생성",
    ),
    Language.ARABIC: MockTemplate(
        plan=(
            "حللت عمليات الميناء الحالية وحالة السفن",
            "حددت الاضطرابات المحتملة وتأثيراتها",
            "ولدت توصيات بناءً على البيانات التشغيلية",
        ),
        recommendations=(
            ("مراقبة {vessel_id} عن كثب لأي تأخير", "منع التأخير المتتالي في عمليات الميناء", 0.85),
            ("إعداد تعيينات مراسي بديلة", "تقليل وقت الانتظار 2-3 ساعات", 0.75),
        ),
        explain=(
            "بناءً على بيانات عمليات الميناء الحالية، حللت الوضع لـ {vessel_id}. تبدو السفينة في الموعد المحدد، "
            "لكن أنصح بمراقبة الأحوال الجوية وإعداد خطط الطوارئ. الميناء يعمل بكفاءة 85% مع توفر جيد للمراسي."
        ),
        thinking="تحليل حالة السفينة وظروف الميناء...",
        vessel_observation="{vessel_id} حالياً في الموعد المحدد دون تأخير",
        berth_observation="الميناء يعمل بكفاءة 85% مع 3 مراسي متاحة",
        final="ولدت توصيات بناءً على الحالة التشغيلية الحالية",
    ),
    Language.RUSSIAN: MockTemplate(
        plan=(
            "Проанализировал текущие портовые операции и состояние судов",
            "Выявил потенциальные сбои и их воздействие",
            "Сгенерировал рекомендации на основе операционных данных",
        ),
        recommendations=(
            ("Тесно следить за {vessel_id} на предмет задержек", "Предотвратить каскадные задержки в портовых операциях", 0.85),
            ("Подготовить альтернативные назначения причалов", "Сократить время ожидания на 2-3 часа", 0.75),
        ),
        explain=(
            "На основе текущих данных портовых операций я проанализировал ситуацию для {vessel_id}. Судно, похоже, "
            "идет по расписанию, но рекомендую следить за погодными условиями и готовить планы на случай "
            "непредвиденных обстоятельств. Порт работает на 85% мощности с хорошей доступностью причалов."
        ),
        thinking="Анализирую состояние судна и портовые условия...",
        vessel_observation="{vessel_id} в настоящее время идет по расписанию без задержек",
        berth_observation="Порт работает на 85% мощности, доступно 3 причала",
        final="Сгенерировал рекомендации на основе текущего операционного статуса",
    ),
    Language.THAI: MockTemplate(
        plan=(
            "วิเคราะห์การดำเนินงานท่าเรือปัจจุบันและสถานะเรือ",
            "ระบุการหยุดชะงักที่อาจเกิดขึ้นและผลกระทบ",
            "สร้างคำแนะนำตามข้อมูลการดำเนินงาน",
        ),
        recommendations=(
            ("ติดตาม {vessel_id} อย่างใกล้ชิดสำหรับความล่าช้าใดๆ", "ป้องกันความล่าช้าต่อเนื่องในการดำเนินงานท่าเรือ", 0.85),
            ("เตรียมการจัดสรรท่าจอดเรือทางเลือก", "ลดเวลารอคอย 2-3 ชั่วโมง", 0.75),
        ),
        explain=(
            "จากข้อมูลการดำเนินงานท่าเรือปัจจุบัน ฉันได้วิเคราะห์สถานการณ์สำหรับ {vessel_id} เรือดูเหมือนจะตรงเวลา "
            "แต่ฉันแนะนำให้ติดตามสภาพอากาศและเตรียมแผนฉุกเฉิน ท่าเรือทำงานที่ 85% ของความจุพร้อมความพร้อมใช้งาน"
            "ของท่าจอดเรือที่ดี"
        ),
        thinking="วิเคราะห์สถานะเรือและสภาพท่าเรือ...",
        vessel_observation="{vessel_id} ปัจจุบันตรงเวลาโดยไม่มีการรายงานความล่าช้า",
        berth_observation="ท่าเรือทำงานที่ 85% ของความจุพร้อมท่าจอดเรือ 3 ท่า",
        final="สร้างคำแนะนำตามสถานะการดำเนินงานปัจจุบัน",
    ),
    Language.ITALIAN: MockTemplate(
        plan=(
            "Analizzato le operazioni portuali attuali e lo stato delle navi",
            "Identificato potenziali interruzioni e i loro impatti",
            "Generato raccomandazioni basate sui dati operativi",
        ),
        recommendations=(
            ("Monitorare da vicino {vessel_id} per eventuali ritardi", "Prevenire ritardi a cascata nelle operazioni portuali", 0.85),
            ("Preparare assegnazioni alternative di ormeggio", "Ridurre il tempo di attesa di 2-3 ore", 0.75),
        ),
        explain=(
            "Basandomi sui dati attuali delle operazioni portuali, ho analizzato la situazione per {vessel_id}. "
            "La nave sembra essere in orario, ma raccomando di monitorare le condizioni meteorologiche e preparare "
            "piani di emergenza. Il porto opera all'85% della capacità con buona disponibilità di ormeggio."
        ),
        thinking="Analizzando lo stato della nave e le condizioni del porto...",
        vessel_observation="{vessel_id} è attualmente in orario senza ritardi segnalati",
        berth_observation="Porto operativo all'85% della capacità con 3 ormeggi disponibili",
        final="Generato raccomandazioni basate sullo stato operativo attuale",
    ),
    Language.PORTUGUESE: MockTemplate(
        plan=(
            "Analisei as operações portuárias atuais e o status dos navios",
            "Identifiquei interrupções potenciais e seus impactos",
            "Gerei recomendações baseadas em dados operacionais",
        ),
        recommendations=(
            ("Monitorar de perto {vessel_id} para qualquer atraso", "Prevenir atrasos em cascata nas operações portuárias", 0.85),
            ("Preparar atribuições alternativas de atracação", "Reduzir tempo de espera em 2-3 horas", 0.75),
        ),
        explain=(
            "Com base nos dados atuais das operações portuárias, analisei a situação para {vessel_id}. "
            "O navio parece estar no horário, mas recomendo monitorar as condições climáticas e preparar planos "
            "de contingência. O porto opera a 85% da capacidade com boa disponibilidade de atracação."
        ),
        thinking="Analisando status do navio e condições portuárias...",
        vessel_observation="{vessel_id} está atualmente no horário sem atrasos reportados",
        berth_observation="Porto operando a 85% da capacidade com 3 atracações disponíveis",
        final="Gerei recomendações baseadas no status operacional atual",
    ),
}
