#!/usr/bin/env python3
"""
Terminal front end for the inventory panel.

Usage:
    treko-panel --base-url http://localhost:8080/api
"""
import argparse
import cmd
import getpass
import sys
from typing import Callable, Optional

from treko.adapters.remote_store import RemoteStoreClient
from treko.config import settings
from treko.schemas.product_schema import Product, describe_product
from treko.services.panel import AdminPanel

FIELDS = {"nome": "nome", "descricao": "descricao", "preco": "preco_text"}


class PanelShell(cmd.Cmd):
    intro = "TREKO - Gestão de estoque. Digite 'help' para ver os comandos."

    def __init__(
        self,
        client: RemoteStoreClient,
        ask: Callable[[str], str] = input,
        ask_secret: Callable[[str], str] = getpass.getpass,
        stdin=None,
        stdout=None,
    ):
        super().__init__(stdin=stdin, stdout=stdout)
        self.ask = ask
        self.ask_secret = ask_secret
        self.panel = AdminPanel(client, on_start_edit=self._show_form_for)
        self.prompt = "login> "

    def _say(self, text: str = ""):
        self.stdout.write(text + "\n")

    @property
    def manager(self):
        return self.panel.manager

    def _needs_login(self) -> bool:
        if self.panel.view != "products":
            self._say("Faça login primeiro.")
            return True
        return False

    def _show_error(self):
        if self.manager.error:
            self._say(f"! {self.manager.error}")

    def _show_form_for(self, product: Product):
        self._say(f"Editando #{product.id}")
        self.do_form("")

    def _parse_id(self, arg: str) -> Optional[int]:
        try:
            return int(arg.strip())
        except ValueError:
            self._say("Informe o id numérico do produto.")
            return None

    # --- session ---

    def do_login(self, arg):
        """login: pede código, nome e senha."""
        if self.panel.view == "products":
            self._say("Já conectado.")
            return
        codigo = self.ask("Código do Funcionário: ")
        nome = self.ask("Nome: ")
        password = self.ask_secret("Senha: ")
        if not self.panel.login(codigo, nome, password):
            self._say(f"! {self.panel.login_form.error}")
            return
        self.prompt = "estoque> "
        self._show_error()
        self.do_list("")

    def do_logout(self, arg):
        """logout: encerra a sessão."""
        self.panel.logout()
        self.prompt = "login> "
        self._say("Sessão encerrada.")

    def do_quit(self, arg):
        """quit: sai do painel."""
        return True

    do_EOF = do_quit

    # --- catalogue ---

    def do_list(self, arg):
        """list: mostra os produtos (respeitando a busca atual)."""
        if self._needs_login():
            return
        collection = self.manager.collection
        self._say(collection.heading)
        if collection.loading:
            self._say("Carregando produtos...")
        if collection.empty_message:
            self._say(collection.empty_message)
        for p in collection.filtered_products:
            self._say(describe_product(p))

    def do_search(self, arg):
        """search [termo]: filtra por nome ou descrição; sem termo limpa a busca."""
        if self._needs_login():
            return
        self.manager.search(arg.strip())
        self.do_list("")

    # --- form ---

    def do_form(self, arg):
        """form: mostra o formulário atual."""
        if self._needs_login():
            return
        form = self.manager.form
        draft = form.draft
        self._say(f"[{form.title}]")
        self._say(f"  nome: {draft.nome}")
        self._say(f"  descricao: {draft.descricao}")
        self._say(f"  preco: {draft.preco_text}")

    def do_set(self, arg):
        """set nome|descricao|preco <valor>: preenche um campo do formulário."""
        if self._needs_login():
            return
        name, _, value = arg.strip().partition(" ")
        if name not in FIELDS:
            self._say("Campos: nome, descricao, preco")
            return
        self.manager.form.update_draft(**{FIELDS[name]: value})

    def do_edit(self, arg):
        """edit <id>: carrega o produto no formulário."""
        if self._needs_login():
            return
        product_id = self._parse_id(arg)
        if product_id is None:
            return
        try:
            self.manager.start_edit(product_id)
        except KeyError:
            self._say(f"Produto #{product_id} não encontrado.")

    def do_cancel(self, arg):
        """cancel: sai do modo de edição e limpa o formulário."""
        if self._needs_login():
            return
        self.manager.form.cancel_edit()
        self.do_form("")

    def do_save(self, arg):
        """save: cadastra ou atualiza o produto do formulário."""
        if self._needs_login():
            return
        label = self.manager.form.submit_label
        if self.manager.submit():
            self._say(f"{label}: ok")
            self.do_list("")
        else:
            self._show_error()

    def do_delete(self, arg):
        """delete <id>: exclui o produto após confirmação."""
        if self._needs_login():
            return
        product_id = self._parse_id(arg)
        if product_id is None:
            return

        request = self.manager.request_delete(product_id)
        answer = self.ask(f"{request.prompt} [s/N] ").strip().lower()
        if answer not in ("s", "sim", "y", "yes"):
            self.manager.cancel_delete(request)
            self._say("Exclusão cancelada.")
            return
        if self.manager.confirm_delete(request):
            self._say(f"Produto #{product_id} excluído.")
        else:
            self._show_error()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Painel de estoque TREKO")
    parser.add_argument("--base-url", default=settings.API_BASE_URL, help="REST API base URL")
    parser.add_argument("--timeout", type=float, default=settings.API_TIMEOUT_SECONDS, help="request timeout in seconds")
    args = parser.parse_args(argv)

    client = RemoteStoreClient(base_url=args.base_url, timeout=args.timeout)
    try:
        PanelShell(client).cmdloop()
    except KeyboardInterrupt:
        print()
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
