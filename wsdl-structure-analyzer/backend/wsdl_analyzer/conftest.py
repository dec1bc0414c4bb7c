# wsdl-structure-analyzer/backend/wsdl_analyzer/conftest.py
"""Sample WSDL documents shared by the test modules."""
import pytest

ORDER_SERVICE_WSDL = """<?xml version="1.0" encoding="UTF-8"?>
<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
     xmlns:soap="http://schemas.xmlsoap.org/wsdl/soap/"
     xmlns:xsd="http://www.w3.org/2001/XMLSchema"
     xmlns:tns="http://example.com/orders"
     name="OrderService"
     targetNamespace="http://example.com/orders">
    <wsdl:types>
        <xsd:schema targetNamespace="http://example.com/orders" elementFormDefault="qualified">
            <xsd:complexType name="Address">
                <xsd:sequence>
                    <xsd:element name="street" type="xsd:string"/>
                    <xsd:element name="city" type="xsd:string"/>
                </xsd:sequence>
            </xsd:complexType>
            <xsd:complexType name="OrderDraft">
                <xsd:complexContent>
                    <xsd:extension base="tns:Address">
                        <xsd:sequence>
                            <xsd:element name="customerId" type="xsd:string"/>
                        </xsd:sequence>
                    </xsd:extension>
                </xsd:complexContent>
            </xsd:complexType>
            <xsd:simpleType name="OrderStatus">
                <xsd:restriction base="xsd:string">
                    <xsd:enumeration value="OPEN"/>
                    <xsd:enumeration value="SHIPPED"/>
                </xsd:restriction>
            </xsd:simpleType>
            <xsd:element name="OrderId" type="xsd:string"/>
            <xsd:element name="GetOrderRequest">
                <xsd:complexType>
                    <xsd:sequence>
                        <xsd:element name="orderId" type="xsd:string"/>
                    </xsd:sequence>
                </xsd:complexType>
            </xsd:element>
            <xsd:element name="GetOrderResponse">
                <xsd:complexType>
                    <xsd:sequence>
                        <xsd:element name="orderId" type="xsd:string"/>
                        <xsd:element name="status" type="tns:OrderStatus"/>
                        <xsd:element name="shipTo" type="tns:Address"/>
                        <xsd:element name="lines" maxOccurs="unbounded">
                            <xsd:complexType>
                                <xsd:sequence>
                                    <xsd:element name="sku" type="xsd:string"/>
                                    <xsd:element name="quantity" type="xsd:int"/>
                                </xsd:sequence>
                            </xsd:complexType>
                        </xsd:element>
                    </xsd:sequence>
                </xsd:complexType>
            </xsd:element>
            <xsd:element name="OrderFault">
                <xsd:complexType>
                    <xsd:sequence>
                        <xsd:element name="code" type="xsd:int"/>
                        <xsd:element name="message" type="xsd:string"/>
                    </xsd:sequence>
                </xsd:complexType>
            </xsd:element>
            <xsd:element name="CreateOrderRequest" type="tns:OrderDraft"/>
            <xsd:element name="CreateOrderResponse">
                <xsd:complexType>
                    <xsd:sequence>
                        <xsd:element ref="tns:OrderId"/>
                    </xsd:sequence>
                </xsd:complexType>
            </xsd:element>
            <xsd:element name="CancelOrderRequest" type="xsd:string"/>
        </xsd:schema>
    </wsdl:types>
    <wsdl:message name="GetOrderInput">
        <wsdl:part name="parameters" element="tns:GetOrderRequest"/>
    </wsdl:message>
    <wsdl:message name="GetOrderOutput">
        <wsdl:part name="parameters" element="tns:GetOrderResponse"/>
    </wsdl:message>
    <wsdl:message name="OrderFaultMessage">
        <wsdl:part name="fault" element="tns:OrderFault"/>
    </wsdl:message>
    <wsdl:message name="CreateOrderInput">
        <wsdl:part name="parameters" element="tns:CreateOrderRequest"/>
    </wsdl:message>
    <wsdl:message name="CreateOrderOutput">
        <wsdl:part name="parameters" element="tns:CreateOrderResponse"/>
    </wsdl:message>
    <wsdl:message name="CancelOrderInput">
        <wsdl:part name="parameters" element="tns:CancelOrderRequest"/>
    </wsdl:message>
    <wsdl:portType name="OrderPortType">
        <wsdl:operation name="GetOrder">
            <wsdl:input message="tns:GetOrderInput"/>
            <wsdl:output message="tns:GetOrderOutput"/>
            <wsdl:fault name="OrderFault" message="tns:OrderFaultMessage"/>
        </wsdl:operation>
        <wsdl:operation name="CreateOrder">
            <wsdl:input message="tns:CreateOrderInput"/>
            <wsdl:output message="tns:CreateOrderOutput"/>
        </wsdl:operation>
        <wsdl:operation name="CancelOrder">
            <wsdl:input message="tns:CancelOrderInput"/>
        </wsdl:operation>
    </wsdl:portType>
    <wsdl:binding name="OrderBinding" type="tns:OrderPortType">
        <soap:binding style="document" transport="http://schemas.xmlsoap.org/soap/http"/>
        <wsdl:operation name="CancelOrder">
            <soap:operation soapAction="urn:CancelOrder"/>
            <wsdl:input><soap:body use="literal"/></wsdl:input>
        </wsdl:operation>
        <wsdl:operation name="GetOrder">
            <soap:operation soapAction="http://example.com/orders/GetOrder"/>
            <wsdl:input><soap:body use="literal"/></wsdl:input>
            <wsdl:output><soap:body use="literal"/></wsdl:output>
            <wsdl:fault name="OrderFault"><soap:fault name="OrderFault" use="literal"/></wsdl:fault>
        </wsdl:operation>
        <wsdl:operation name="CreateOrder">
            <soap:operation soapAction=""/>
            <wsdl:input><soap:body use="literal"/></wsdl:input>
            <wsdl:output><soap:body use="literal"/></wsdl:output>
        </wsdl:operation>
        <wsdl:operation name="LegacyPing">
            <soap:operation soapAction="urn:LegacyPing"/>
        </wsdl:operation>
    </wsdl:binding>
    <wsdl:service name="OrderService">
        <wsdl:port name="OrderPort" binding="tns:OrderBinding">
            <soap:address location="http://example.com/orders/endpoint"/>
        </wsdl:port>
    </wsdl:service>
</wsdl:definitions>
"""

# Default WSDL namespace, SOAP 1.2 under an unusual prefix, one-way operations only.
ONE_WAY_WSDL = """<definitions xmlns="http://schemas.xmlsoap.org/wsdl/"
     xmlns:s12="http://schemas.xmlsoap.org/wsdl/soap12/"
     xmlns:xsd="http://www.w3.org/2001/XMLSchema"
     xmlns:ship="http://example.com/shipping"
     targetNamespace="http://example.com/shipping">
    <message name="ShipmentNotice">
        <part name="trackingNumber" type="xsd:string"/>
    </message>
    <portType name="ShippingPortType">
        <operation name="NotifyShipment">
            <input message="ship:ShipmentNotice"/>
        </operation>
        <operation name="NotifyDelivery">
            <input message="ship:ShipmentNotice"/>
        </operation>
    </portType>
    <binding name="ShippingBinding" type="ship:ShippingPortType">
        <s12:binding transport="http://schemas.xmlsoap.org/soap/http"/>
        <operation name="NotifyShipment">
            <s12:operation soapAction="urn:NotifyShipment"/>
            <input><s12:body use="literal"/></input>
        </operation>
        <operation name="NotifyDelivery">
            <s12:operation soapAction="urn:NotifyDelivery"/>
            <input><s12:body use="literal"/></input>
        </operation>
    </binding>
    <service name="ShippingService">
        <port name="ShippingPort" binding="ship:ShippingBinding">
            <s12:address location="https://example.com/shipping"/>
        </port>
    </service>
</definitions>
"""

# A single rpc-style operation, unprefixed WSDL elements.
CALCULATOR_WSDL = """
<definitions xmlns="http://schemas.xmlsoap.org/wsdl/"
     xmlns:soap="http://schemas.xmlsoap.org/wsdl/soap/"
     xmlns:tns="http://www.example.com/calculator"
     xmlns:xsd="http://www.w3.org/2001/XMLSchema"
     name="CalculatorService"
     targetNamespace="http://www.example.com/calculator">
    <message name="AddRequest">
        <part name="a" type="xsd:int"/>
        <part name="b" type="xsd:int"/>
    </message>
    <message name="AddResponse">
        <part name="result" type="xsd:int"/>
    </message>
    <portType name="CalculatorPortType">
        <operation name="add">
            <input message="tns:AddRequest"/>
            <output message="tns:AddResponse"/>
        </operation>
    </portType>
    <binding name="CalculatorBinding" type="tns:CalculatorPortType">
        <soap:binding style="rpc" transport="http://schemas.xmlsoap.org/soap/http"/>
        <operation name="add">
            <soap:operation soapAction="add"/>
            <input><soap:body use="literal" namespace="http://www.example.com/calculator"/></input>
            <output><soap:body use="literal" namespace="http://www.example.com/calculator"/></output>
        </operation>
    </binding>
    <service name="CalculatorService">
        <port name="CalculatorPort" binding="tns:CalculatorBinding">
            <soap:address location="http://www.example.com/calculator"/>
        </port>
    </service>
</definitions>
"""

# Generated without portType operations; only the binding names them.
BINDING_ONLY_WSDL = """<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
     xmlns:soap="http://schemas.xmlsoap.org/wsdl/soap/"
     targetNamespace="urn:inventory">
    <wsdl:portType name="InventoryPortType"/>
    <wsdl:binding name="InventoryBinding" type="InventoryPortType">
        <wsdl:operation name="CheckStock">
            <soap:operation soapAction="urn:CheckStock"/>
            <wsdl:input/>
            <wsdl:output/>
        </wsdl:operation>
    </wsdl:binding>
</wsdl:definitions>
"""

# Well-formed, but without any service address.
NO_ADDRESS_WSDL = """<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
     targetNamespace="urn:audit">
    <wsdl:portType name="AuditPortType">
        <wsdl:operation name="Record">
            <wsdl:input message="Entry"/>
        </wsdl:operation>
    </wsdl:portType>
</wsdl:definitions>
"""

MALFORMED_WSDL = """<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/">
    <wsdl:portType name="Broken">
        <wsdl:operation name="GetOrder">
            <wsdl:input message="GetOrderInput"/>
            <wsdl:output message="GetOrderOutput">
    </wsdl:portType>
"""


@pytest.fixture
def order_wsdl() -> str:
    return ORDER_SERVICE_WSDL


@pytest.fixture
def one_way_wsdl() -> str:
    return ONE_WAY_WSDL


@pytest.fixture
def calculator_wsdl() -> str:
    return CALCULATOR_WSDL


@pytest.fixture
def binding_only_wsdl() -> str:
    return BINDING_ONLY_WSDL


@pytest.fixture
def no_address_wsdl() -> str:
    return NO_ADDRESS_WSDL


@pytest.fixture
def malformed_wsdl() -> str:
    return MALFORMED_WSDL
