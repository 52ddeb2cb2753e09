"""
Built-in checklist templates.

Item texts are in Portuguese, the language of the product's users.
"""

from typing import Optional

from .models import ChecklistItemDraft, ChecklistPhase, ChecklistTemplate

PRE = ChecklistPhase.PRE
DURING = ChecklistPhase.DURING
POST = ChecklistPhase.POST


def _template(template_id: str, name: str, description: str, items: list[tuple[ChecklistPhase, str]]) -> ChecklistTemplate:
    return ChecklistTemplate(
        id=template_id,
        name=name,
        description=description,
        items=[ChecklistItemDraft(phase=phase, text=text) for phase, text in items],
    )


CHECKLIST_TEMPLATES: list[ChecklistTemplate] = [
    _template(
        "casamento",
        "Casamento",
        "Template completo para eventos de casamento",
        [
            (PRE, "Confirmar horário e local com cliente"),
            (PRE, "Verificar equipamentos (câmera, iluminação, cabine)"),
            (PRE, "Carregar baterias e verificar memória"),
            (PRE, "Preparar props e acessórios temáticos"),
            (PRE, "Testar impressora e papel fotográfico"),
            (PRE, "Conferir backdrop e cenário"),
            (PRE, "Separar cabos e extensões extras"),
            (PRE, "Revisar contrato e horários"),
            (DURING, "Montar estrutura com antecedência"),
            (DURING, "Testar todos os equipamentos no local"),
            (DURING, "Registrar fotos de instalação"),
            (DURING, "Acompanhar fluxo de convidados"),
            (DURING, "Verificar estoque de papel e insumos"),
            (DURING, "Fazer backup das fotos durante evento"),
            (POST, "Desmontar e conferir equipamentos"),
            (POST, "Backup final de todas as fotos"),
            (POST, "Enviar galeria para cliente"),
            (POST, "Solicitar feedback/avaliação"),
            (POST, "Confirmar recebimento do pagamento final"),
        ],
    ),
    _template(
        "corporativo",
        "Corporativo",
        "Template para eventos empresariais",
        [
            (PRE, "Confirmar contato do responsável no local"),
            (PRE, "Verificar acesso e estacionamento"),
            (PRE, "Preparar personalização com logo da empresa"),
            (PRE, "Testar equipamentos"),
            (PRE, "Confirmar horário de montagem liberado"),
            (PRE, "Verificar tomadas e voltagem do local"),
            (DURING, "Chegar com antecedência para montagem"),
            (DURING, "Configurar backdrop corporativo"),
            (DURING, "Testar iluminação e enquadramento"),
            (DURING, "Manter fluxo organizado de participantes"),
            (DURING, "Monitorar impressões e insumos"),
            (POST, "Desmontar equipamentos"),
            (POST, "Enviar fotos para empresa"),
            (POST, "Emitir nota fiscal se necessário"),
            (POST, "Agendar follow-up comercial"),
        ],
    ),
    _template(
        "aniversario",
        "Aniversário / 15 Anos",
        "Template para festas de aniversário e debutantes",
        [
            (PRE, "Confirmar tema da festa com cliente"),
            (PRE, "Preparar props temáticos"),
            (PRE, "Verificar cenário e iluminação"),
            (PRE, "Testar impressão com layout personalizado"),
            (PRE, "Confirmar horário de chegada"),
            (PRE, "Separar equipamentos e acessórios"),
            (DURING, "Montar estrutura antes dos convidados"),
            (DURING, "Organizar fila e fluxo de fotos"),
            (DURING, "Tirar foto especial com aniversariante"),
            (DURING, "Manter área organizada"),
            (DURING, "Verificar papel e tinta"),
            (POST, "Desmontar e guardar equipamentos"),
            (POST, "Fazer backup das fotos"),
            (POST, "Enviar galeria para cliente"),
            (POST, "Pedir depoimento para redes sociais"),
        ],
    ),
    _template(
        "totem",
        "Totem / Cabine / Foto Lembrança",
        "Template para serviços de totem e cabine fotográfica",
        [
            (PRE, "Verificar funcionamento do totem/cabine"),
            (PRE, "Testar software e câmera"),
            (PRE, "Carregar papel e tinta na impressora"),
            (PRE, "Preparar layout de impressão"),
            (PRE, "Verificar iluminação interna"),
            (PRE, "Separar extensões e cabos"),
            (DURING, "Montar totem em local estratégico"),
            (DURING, "Testar todas as funções"),
            (DURING, "Orientar convidados no uso"),
            (DURING, "Monitorar impressões"),
            (DURING, "Repor insumos quando necessário"),
            (POST, "Desligar e desmontar equipamento"),
            (POST, "Exportar fotos do evento"),
            (POST, "Limpar e guardar equipamentos"),
            (POST, "Enviar link de galeria"),
        ],
    ),
    _template(
        "geral",
        "Padrão Geral",
        "Template genérico para qualquer tipo de evento",
        [
            (PRE, "Confirmar data, horário e local"),
            (PRE, "Verificar equipamentos"),
            (PRE, "Preparar materiais e insumos"),
            (PRE, "Testar tudo antes de sair"),
            (PRE, "Confirmar forma de pagamento"),
            (DURING, "Chegar com antecedência"),
            (DURING, "Montar e testar no local"),
            (DURING, "Executar serviço conforme combinado"),
            (DURING, "Registrar fotos do trabalho"),
            (POST, "Desmontar e conferir materiais"),
            (POST, "Fazer backup dos arquivos"),
            (POST, "Enviar entregáveis ao cliente"),
            (POST, "Confirmar recebimento do pagamento"),
            (POST, "Solicitar avaliação"),
        ],
    ),
]

_TEMPLATES_BY_ID = {template.id: template for template in CHECKLIST_TEMPLATES}


def get_template(template_id: str) -> Optional[ChecklistTemplate]:
    """Look up a built-in template by id."""
    return _TEMPLATES_BY_ID.get(template_id)


def list_templates() -> list[ChecklistTemplate]:
    return list(CHECKLIST_TEMPLATES)
