"""Default HTML template and classification keyword lists for the tree page."""

DEFAULT_TITLE = "Domain List Community Tree"

DEFAULT_SOURCE_URL = (
    "https://raw.githubusercontent.com/v2ray/domain-list-community/refs/heads/master/data/{name}"
)

COMPANY_KEYWORDS = (
    "google", "microsoft", "apple", "facebook", "amazon", "netflix", "github",
    "gitlab", "twitter", "youtube", "instagram", "tiktok", "zoom", "discord",
    "spotify", "openai", "alibaba", "baidu", "tencent", "douban", "weibo",
    "bilibili",
)

COUNTRY_CODES = ("cn", "us", "jp", "kr", "hk", "tw", "uk", "de", "fr", "ru")

# Placeholders: title, generated_at, total_categories, tree_html.
# Literal braces in CSS/JS are doubled for str.format.
HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
body {{ font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 20px; background-color: #f5f5f5; color: #333; }}
.container {{ max-width: 1200px; margin: 0 auto; background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }}
.header {{ text-align: center; margin-bottom: 30px; }}
.controls {{ display: flex; gap: 10px; justify-content: center; margin-bottom: 20px; flex-wrap: wrap; }}
.btn {{ padding: 10px 20px; background: #007bff; color: white; border: none; border-radius: 5px; cursor: pointer; font-size: 14px; }}
.btn:hover {{ background: #0056b3; }}
.tree {{ font-family: 'Courier New', monospace; line-height: 1.6; margin-top: 20px; }}
.node {{ margin: 2px 0; padding: 2px 4px; display: flex; align-items: center; justify-content: space-between; cursor: pointer; }}
.node:hover {{ background-color: #e3f2fd; border-radius: 4px; }}
.node-content {{ flex: 1; }}
.node.category {{ color: #7b1fa2; font-weight: bold; }}
.node.company {{ color: #2e7d32; }}
.node.geo {{ color: #f57c00; }}
.node.service {{ color: #1976d2; }}
.collapsible {{ position: relative; }}
.collapsible:before {{ content: '\\25BC'; position: absolute; left: -15px; color: #666; font-size: 10px; }}
.collapsible.collapsed:before {{ content: '\\25B6'; }}
.children {{ margin-left: 20px; }}
.children.hidden {{ display: none; }}
.view-source-btn {{ padding: 2px 8px; background: #28a745; color: white; border-radius: 3px; font-size: 11px; margin-left: 10px; text-decoration: none; opacity: 0.7; }}
.view-source-btn:hover {{ opacity: 1; }}
</style>
</head>
<body>
<div class="container">
<div class="header">
<h1>{title}</h1>
<p>Updated: {generated_at} | {total_categories} categories</p>
</div>
<div class="controls">
<button class="btn" id="expandAllBtn">Expand all</button>
<button class="btn" id="collapseAllBtn">Collapse all</button>
</div>
<div class="tree" id="tree">
{tree_html}
</div>
</div>
<script>
document.addEventListener('click', function(e) {{
  if (e.target.classList.contains('view-source-btn')) return;
  let node = e.target.classList.contains('node-content') ? e.target.parentElement : e.target;
  if (node.classList.contains('collapsible')) {{
    node.classList.toggle('collapsed');
    const children = node.nextElementSibling;
    if (children && children.classList.contains('children')) children.classList.toggle('hidden');
  }}
}});
document.getElementById('expandAllBtn').addEventListener('click', function() {{
  document.querySelectorAll('.collapsible').forEach(n => n.classList.remove('collapsed'));
  document.querySelectorAll('.children').forEach(c => c.classList.remove('hidden'));
}});
document.getElementById('collapseAllBtn').addEventListener('click', function() {{
  document.querySelectorAll('.collapsible').forEach(n => n.classList.add('collapsed'));
  document.querySelectorAll('.children').forEach(c => c.classList.add('hidden'));
}});
document.querySelectorAll('.tree > .node.collapsible').forEach(function(node) {{
  node.classList.remove('collapsed');
  const children = node.nextElementSibling;
  if (children) children.classList.remove('hidden');
}});
</script>
</body>
</html>
"""
