"""
Account Management Examples

Lists servers and domains and dry-runs a template push with AccountClient.
Set POSTMARK_ACCOUNT_TOKEN before running.
"""

import asyncio

from postmark_client import AccountClient, NotFoundError
from postmark_client.models import FilteringParameters, ServerFilteringParameters, TemplatesPushRequest


async def list_servers(client: AccountClient):
    print("\n=== Servers ===")

    servers = await client.get_servers(ServerFilteringParameters(count=10))
    print(f"Total: {servers.total_count}")
    for server in servers.servers:
        print(f"  {server.id}: {server.name}")
    return servers.servers


async def list_domains(client: AccountClient):
    print("\n=== Domains ===")

    domains = await client.get_domains(FilteringParameters(count=10))
    for domain in domains.domains:
        print(f"  {domain.name}: DKIM={domain.dkim_verified} ReturnPath={domain.return_path_domain_verified}")

    try:
        await client.get_domain(0)
    except NotFoundError as e:
        print(f"Missing domain: [{e.error_code}] {e.message}")


async def preview_template_push(client: AccountClient, servers):
    print("\n=== Template Push (dry run) ===")

    if len(servers) < 2:
        print("Need at least two servers")
        return

    result = await client.push_templates(TemplatesPushRequest(
        source_server_id=servers[0].id,
        destination_server_id=servers[1].id,
        perform_changes=False,
    ))
    for action in result.templates:
        print(f"  {action.action}: {action.alias or action.name}")


async def main():
    async with AccountClient.from_env() as client:
        servers = await list_servers(client)
        await list_domains(client)
        await preview_template_push(client, servers)


if __name__ == "__main__":
    asyncio.run(main())
