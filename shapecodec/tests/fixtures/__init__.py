"""Test fixtures for shapecodec tests.

This module provides sample shape maps and service definitions for testing
shape resolution.
"""

# One shape of every scalar kind
SCALAR_SHAPES = {
    'Active': {'type': 'boolean'},
    'Ratio': {'type': 'float'},
    'Precise': {'type': 'double'},
    'Count': {'type': 'integer'},
    'Big': {'type': 'long'},
    'Label': {'type': 'string'},
    'Payload': {'type': 'blob'},
}

# Enums, lists and maps around them
COLLECTION_SHAPES = {
    'Tier': {'type': 'string', 'enum': ['Gold', 'Silver']},
    'Weight': {'type': 'string', 'enum': ['1.0', '2.0']},
    'Amount': {'type': 'integer'},
    'Name': {'type': 'string'},
    'Prices': {'type': 'map', 'key': {'shape': 'Weight'}, 'value': {'shape': 'Amount'}},
    'TierCounts': {'type': 'map', 'key': {'shape': 'Tier'}, 'value': {'shape': 'Amount'}},
    'Attributes': {'type': 'map', 'key': {'shape': 'Name'}, 'value': {'shape': 'Name'}},
    'TierList': {'type': 'list', 'member': {'shape': 'Tier'}},
    'NameList': {'type': 'list', 'member': {'shape': 'Name'}, 'flattened': True},
    'CreatedAt': {'type': 'timestamp'},
    'History': {'type': 'list', 'member': {'shape': 'CreatedAt'}},
}

# A small queue service, in the shape of an AWS service definition
QUEUE_SERVICE = {
    'metadata': {
        'apiVersion': '2012-11-05',
        'endpointPrefix': 'sqs',
        'protocol': 'query',
        'serviceFullName': 'Simple Queue Service',
    },
    'operations': {
        'DescribeQueue': {
            'name': 'DescribeQueue',
            'input': {'shape': 'DescribeQueueRequest'},
            'output': {'shape': 'DescribeQueueResponse'},
        },
        'PurgeQueue': {
            'name': 'PurgeQueue',
            'input': {'shape': 'PurgeQueueRequest'},
        },
    },
    'shapes': {
        'DescribeQueueRequest': {
            'type': 'structure',
            'required': ['QueueUrl'],
            'members': {
                'QueueUrl': {'shape': 'String'},
                'AttributeNames': {'shape': 'AttributeNameList'},
            },
        },
        'DescribeQueueResponse': {
            'type': 'structure',
            'members': {
                'Attributes': {'shape': 'AttributeMap'},
                'Tags': {'shape': 'TagList'},
            },
        },
        'PurgeQueueRequest': {
            'type': 'structure',
            'required': ['QueueUrl'],
            'members': {'QueueUrl': {'shape': 'String'}},
            'documentation': '<p>Deletes every message in a queue.</p>',
        },
        'QueueDoesNotExist': {
            'type': 'structure',
            'members': {},
            'exception': True,
            'documentation': '<p>The queue does not exist.</p>',
        },
        'AttributeName': {
            'type': 'string',
            'enum': ['All', 'VisibilityTimeout', 'CreatedTimestamp'],
        },
        'AttributeNameList': {
            'type': 'list',
            'member': {'shape': 'AttributeName', 'locationName': 'AttributeName'},
            'flattened': True,
        },
        'AttributeMap': {
            'type': 'map',
            'key': {'shape': 'AttributeName', 'locationName': 'Name'},
            'value': {'shape': 'String', 'locationName': 'Value'},
            'flattened': True,
        },
        'Tag': {
            'type': 'structure',
            'members': {
                'Key': {'shape': 'String'},
                'Value': {'shape': 'String'},
            },
        },
        'TagList': {'type': 'list', 'member': {'shape': 'Tag'}},
        'String': {'type': 'string'},
    },
}

# A structure that refers back to itself through a list
RECURSIVE_SHAPES = {
    'Node': {
        'type': 'structure',
        'members': {
            'Value': {'shape': 'Label'},
            'Children': {'shape': 'NodeList'},
        },
    },
    'NodeList': {'type': 'list', 'member': {'shape': 'Node'}},
    'Label': {'type': 'string'},
}
