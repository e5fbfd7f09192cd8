"""Tests for AppSync data source creation."""

import pytest
from aws_cdk import assertions

from appsync_cdk.appsync.api import create_graphql_api
from appsync_cdk.appsync.datasources import create_dynamodb_datasource
from appsync_cdk.dynamodb_tables import create_entity_table
from appsync_cdk.iam_roles import create_appsync_service_role


@pytest.fixture
def declared(stack, config, graph):
    """Declare table, role, API and data source; return the template."""
    table = create_entity_table(stack, config, graph)
    role = create_appsync_service_role(stack, graph)
    api = create_graphql_api(stack, config, graph)
    datasource = create_dynamodb_datasource(stack, api, config, table, role, graph)
    return datasource, assertions.Template.from_stack(stack)


class TestCreateDynamodbDatasource:
    """Tests for create_dynamodb_datasource function."""

    def test_datasource_name_and_type(self, declared):
        datasource, template = declared

        assert datasource.name == "ItemsDynamoDataSource"
        template.has_resource_properties(
            "AWS::AppSync::DataSource",
            {"Name": "ItemsDynamoDataSource", "Type": "AMAZON_DYNAMODB"},
        )

    def test_binds_table_role_and_region(self, declared):
        _, template = declared
        (table_id,) = template.find_resources("AWS::DynamoDB::Table").keys()
        (role_id,) = template.find_resources("AWS::IAM::Role").keys()

        template.has_resource_properties(
            "AWS::AppSync::DataSource",
            {
                "DynamoDBConfig": {
                    "TableName": {"Ref": table_id},
                    "AwsRegion": {"Ref": "AWS::Region"},
                },
                "ServiceRoleArn": {"Fn::GetAtt": [role_id, "Arn"]},
            },
        )

    def test_depends_on_table_and_role(self, declared, graph):
        _, template = declared
        (table_id,) = template.find_resources("AWS::DynamoDB::Table").keys()
        (role_id,) = template.find_resources("AWS::IAM::Role").keys()

        assert graph.dependencies_of("tableDatasource") == ("cdk-api", "ItemsDynamoDBRole")
        (resource,) = template.find_resources("AWS::AppSync::DataSource").values()
        assert {table_id, role_id} <= set(resource["DependsOn"])
