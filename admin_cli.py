"""
Gestão Chevals - CLI Admin
Ferramenta de linha de comando para consultar a API

Uso:
    python admin_cli.py login
    python admin_cli.py entidades list
    python admin_cli.py projetos list
    python admin_cli.py resumo [caixa|competencia]
    python admin_cli.py usuarios list
    python admin_cli.py usuarios toggle <usuario_id>
"""
import os
import sys
from pathlib import Path
from typing import Optional

import httpx

BASE_URL = os.environ.get("GESTAO_API_URL", "http://localhost:8080")
TOKEN_FILE = Path(".gestao_token")


def save_token(token: str):
    TOKEN_FILE.write_text(token)


def load_token() -> Optional[str]:
    if TOKEN_FILE.exists():
        return TOKEN_FILE.read_text().strip()
    return None


def get_headers():
    token = load_token()
    if not token:
        print("Erro: Faça login primeiro com 'python admin_cli.py login'")
        sys.exit(1)
    return {"Authorization": f"Bearer {token}"}


def request(method: str, path: str, **kwargs) -> Optional[httpx.Response]:
    """Chamada autenticada; redirecionamento para /login indica sessão expirada"""
    try:
        response = httpx.request(method, f"{BASE_URL}{path}", headers=get_headers(), **kwargs)
    except httpx.HTTPError as e:
        print(f"✗ Erro de conexão: {e}")
        return None

    if response.status_code == 303:
        print("✗ Sessão expirada. Faça login novamente")
        return None
    if response.status_code >= 400:
        print(f"✗ Erro: {response.json().get('detail', response.text)}")
        return None
    return response


def cmd_login():
    """Login no sistema"""
    email = input("Email [admin@gestao-chevals.com]: ").strip() or "admin@gestao-chevals.com"
    password = input("Senha: ").strip()

    try:
        response = httpx.post(
            f"{BASE_URL}/api/auth/login",
            json={"email": email, "password": password}
        )
    except httpx.HTTPError as e:
        print(f"✗ Erro de conexão: {e}")
        return

    if response.status_code != 200:
        print(f"✗ Erro: {response.json().get('detail', 'Falha no login')}")
        return

    data = response.json()
    save_token(data["access_token"])
    print(f"\n✓ Login bem sucedido!")
    print(f"  Usuário: {data['email']}")
    if data.get("requires_password_change"):
        print("  ! Troca de senha obrigatória no primeiro acesso")


def cmd_entidades_list():
    """Lista entidades ativas"""
    response = request("GET", "/api/entidades")
    if response is None:
        return

    entidades = response.json()
    print(f"\n{'='*70}")
    print(f"{'Nome':<30} | {'Documento':<18} | {'Tipos':<16}")
    print(f"{'='*70}")
    for e in entidades:
        tipos = ",".join(
            t for t, flag in (("C", e["e_cliente"]), ("P", e["e_parceiro"]), ("F", e["e_fornecedor"])) if flag
        )
        print(f"{e['nome'][:30]:<30} | {(e.get('documento') or '-'):<18} | {tipos:<16}")
    print(f"\nTotal: {len(entidades)} entidades")


def cmd_projetos_list():
    """Lista projetos"""
    response = request("GET", "/api/projetos")
    if response is None:
        return

    projetos = response.json()
    print(f"\n{'='*70}")
    print(f"{'Nome':<34} | {'Início':<10} | {'Status':<14}")
    print(f"{'='*70}")
    for p in projetos:
        print(f"{p['nome'][:34]:<34} | {(p.get('data_inicio') or '-'):<10} | {p['status']:<14}")
    print(f"\nTotal: {len(projetos)} projetos")


def cmd_resumo(regime: str = "caixa"):
    """Resumo financeiro"""
    response = request("GET", "/api/financeiro/resumo", params={"regime": regime})
    if response is None:
        return

    resumo = response.json()
    print(f"\n{'='*40}")
    print(f"  RESUMO FINANCEIRO ({resumo['regime']})")
    print(f"{'='*40}")
    print(f"  Receitas:  R$ {resumo['receitas']:>12,.2f}")
    print(f"  Despesas:  R$ {resumo['despesas']:>12,.2f}")
    print(f"  Resultado: R$ {resumo['resultado']:>12,.2f}")
    print(f"  Margem:       {resumo['margem']:>11.2f}%")
    print(f"  A receber: R$ {resumo['a_receber']:>12,.2f}")
    print(f"  A pagar:   R$ {resumo['a_pagar']:>12,.2f}")


def cmd_usuarios_list():
    """Lista usuários"""
    response = request("GET", "/api/usuarios")
    if response is None:
        return

    usuarios = response.json()
    print(f"\n{'='*70}")
    print(f"{'ID':<36} | {'Email':<24} | {'Ativo':<5}")
    print(f"{'='*70}")
    for u in usuarios:
        print(f"{str(u['id']):<36} | {u['email'][:24]:<24} | {'sim' if u['ativo'] else 'não':<5}")
    print(f"\nTotal: {len(usuarios)} usuários")


def cmd_usuarios_toggle(usuario_id: str):
    """Ativa/desativa usuário"""
    response = request("POST", f"/api/usuarios/{usuario_id}/toggle-ativo")
    if response is not None:
        print(f"✓ {response.json()['message']}")


def print_help():
    print(__doc__)


def main():
    if len(sys.argv) < 2:
        print_help()
        return

    cmd = sys.argv[1].lower()
    sub = sys.argv[2] if len(sys.argv) > 2 else None

    if cmd == "login":
        cmd_login()
    elif cmd == "entidades" and sub == "list":
        cmd_entidades_list()
    elif cmd == "projetos" and sub == "list":
        cmd_projetos_list()
    elif cmd == "resumo":
        cmd_resumo(sub or "caixa")
    elif cmd == "usuarios" and sub == "list":
        cmd_usuarios_list()
    elif cmd == "usuarios" and sub == "toggle" and len(sys.argv) >= 4:
        cmd_usuarios_toggle(sys.argv[3])
    else:
        print_help()


if __name__ == "__main__":
    main()
