"""Pacote do relay GCP Monitoring / Adapty -> Discord.

Este pacote contém:
- config: configuração lida do ambiente (Settings)
- constants: tabelas fixas (cores, títulos, descrições, identidade do remetente)
- errors: erros de payload e de configuração
- schemas: modelos tipados (pydantic) e a representação canônica do evento Adapty
- utils: formatação de datas, durações, valores e rótulos de evento
- detection: classificação do payload bruto
- verification: respostas às verificações do webhook
- formatters: conversão de cada origem para a mensagem do Discord
- dispatcher: pipeline classificação -> renderização
- services: envio ao webhook do Discord
- controller: criação do Flask app e endpoints
"""
