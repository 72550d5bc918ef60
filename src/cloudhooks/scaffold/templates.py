"""File contents written into a new sample project."""

SAMPLE_SOURCE = """
// Use Parse.Cloud.define to define as many cloud functions as you want.
// For example:
Parse.Cloud.define("hello", function(request, response) {
  response.success("Hello world!");
});
"""

SAMPLE_HTML = """<html>
  <head>
    <title>My Sample App</title>
  </head>
  <body>
    <p>Congratulations! You are already setup!</p>
  </body>
</html>
"""

# (directory, filename, content)
PROJECT_FILES = [
    ("cloud", "main.js", SAMPLE_SOURCE),
    ("public", "index.html", SAMPLE_HTML),
]

CURL_TEMPLATE = """curl -X POST \\
 -H "X-Parse-Application-Id: {application_id}" \\
 -H "X-Parse-REST-API-Key: {rest_key}" \\
 -H "Content-Type: application/json" \\
 -d '{{}}' \\
 {functions_url}
"""

HELP_TEMPLATE = """Your Cloud Code has been created at {project_dir}.
Next, you might want to deploy this code.
This includes a "Hello world" cloud function, so once you deploy
you can test that it works, with:

{curl}"""
