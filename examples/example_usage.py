from google.cloud import bigquery

from bqsql import BigQuerySql, and_, format_sql, identifier, in_list

TABLE_ID = "bigquery-public-data.ga4_obfuscated_sample_ecommerce.events_20201101"

client = bigquery.Client()
runner = BigQuerySql(client, maximum_bytes_billed=10 * 1024**3)

where = and_(
    format_sql("event_name IN {}", in_list(["page_view", "purchase"])),
    format_sql("platform = {}", "WEB"),
)
query = format_sql(
    "SELECT event_name, COUNT(*) AS value FROM {table} WHERE {where} GROUP BY event_name",
    table=identifier(TABLE_ID),
    where=where,
)

print(query.query, query.params)
print(runner.dry_run(query))
print(runner.query(query))
